"""Job description parsing into a JobProfile."""

import logging
import re
from pathlib import Path

from talent_match.documents.text_extractor import extract_text
from talent_match.jobs.models import DEFAULT_COMPANY, DEFAULT_TITLE, JobProfile, JobRequirements
from talent_match.utils.taxonomy import ROLE_NOUNS
from talent_match.utils.text_processing import degree_labels, extract_keywords, extract_skills

logger = logging.getLogger("talent_match.jobs")

DESCRIPTION_PREVIEW_CHARS = 500

REQUIRED_YEARS_PATTERN = re.compile(r"(\d+)[+\-]?\s*years?\s*(of)?\s*experience", re.IGNORECASE)


def parse_job_description(text: str, company: str = DEFAULT_COMPANY) -> JobProfile:
    """Extract a structured profile from job posting text.

    Never raises: missing, non-string or blank text yields the default profile.
    """
    company = company or DEFAULT_COMPANY
    if not isinstance(text, str) or not text.strip():
        return JobProfile(company=company)

    requirements = JobRequirements(
        skills=extract_skills(text),
        experience=extract_required_years(text),
        education=tuple(degree_labels(text)),
    )
    job = JobProfile(
        title=extract_title(text),
        company=company,
        description=text[:DESCRIPTION_PREVIEW_CHARS],
        requirements=requirements,
        keywords=tuple(extract_keywords(text)),
        raw_text=text,
    )

    logger.info(
        "Parsed job '%s': %d skills, %d years, education=%s, %d keywords",
        job.title,
        len(requirements.skills),
        requirements.experience,
        list(requirements.education) or "none",
        len(job.keywords),
    )
    return job


def parse_job_file(file_path: str, company: str = DEFAULT_COMPANY) -> JobProfile:
    """Extract text from a job posting file (PDF, DOCX, TXT) and parse it."""
    logger.debug("Reading job posting from %s", Path(file_path).name)
    return parse_job_description(extract_text(file_path), company)


def extract_title(text: str) -> str:
    """First line that names a role, e.g. "Senior Backend Engineer"."""
    for line in text.split("\n"):
        line = line.strip()
        if len(line) > 5 and any(noun in line for noun in ROLE_NOUNS):
            return line
    return DEFAULT_TITLE


def extract_required_years(text: str) -> int:
    match = REQUIRED_YEARS_PATTERN.search(text)
    return int(match.group(1)) if match else 0
