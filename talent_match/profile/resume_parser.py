"""Resume text parsing into a CandidateProfile."""

import logging
import re
from pathlib import Path
from typing import Optional

from talent_match.documents.text_extractor import extract_text
from talent_match.profile.models import CandidateProfile, PersonalInfo
from talent_match.profile.name_extractor import extract_name
from talent_match.profile.sections import extract_education, extract_experience
from talent_match.utils.taxonomy import CERTIFICATION_PATTERNS
from talent_match.utils.text_processing import extract_skills

logger = logging.getLogger("talent_match.profile")

EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

# Optional "+44 " style prefix, then digits with space/dot/dash/paren separators.
PHONE_PATTERN = re.compile(r"(?:\+\d{1,3}[ .-]?)?\(?\d[\d ().-]{5,18}\d")
_BARE_YEAR_RANGE = re.compile(r"^(?:19|20)\d{2}\s*[-–]\s*(?:19|20)\d{2}$")


def parse_resume(text: str, file_name: Optional[str] = None) -> CandidateProfile:
    """Extract a structured profile from resume text.

    Never raises: missing, non-string or blank text yields the default profile.
    file_name is only used as a fallback source for the candidate's name.
    """
    if not isinstance(text, str) or not text.strip():
        logger.debug("Empty resume text%s", f" ({file_name})" if file_name else "")
        return CandidateProfile()

    lines = [line.strip() for line in text.split("\n")]

    email = extract_email(text)
    phone = extract_phone(text)
    name = extract_name(lines, email, file_name)

    profile = CandidateProfile(
        personal_info=PersonalInfo(name=name, email=email, phone=phone),
        experience=tuple(extract_experience(text)),
        education=tuple(extract_education(text)),
        skills=extract_skills(text),
        certifications=tuple(extract_certifications(text)),
        raw_text=text,
    )

    logger.info(
        "Parsed resume: %s (%d skills, %d experience entries, %d education entries)",
        name,
        len(profile.skills),
        len(profile.experience),
        len(profile.education),
    )
    return profile


def parse_resume_file(file_path: str) -> CandidateProfile:
    """Extract text from a resume file (PDF, DOCX, TXT) and parse it."""
    text = extract_text(file_path)
    return parse_resume(text, Path(file_path).name)


def extract_email(text: str) -> str:
    match = EMAIL_PATTERN.search(text)
    return match.group(0) if match else ""


def extract_phone(text: str) -> str:
    """First phone-shaped run holding 7 to 14 digits."""
    for match in PHONE_PATTERN.finditer(text):
        candidate = match.group(0).strip()
        digits = sum(c.isdigit() for c in candidate)
        if 7 <= digits <= 14 and not _BARE_YEAR_RANGE.match(candidate.strip("() ")):
            return candidate
    return ""


def extract_certifications(text: str) -> list[str]:
    certs = []
    seen = set()
    for pattern in CERTIFICATION_PATTERNS:
        for match in pattern.finditer(text):
            cert = match.group(1).strip()
            key = cert.lower()
            if key not in seen:
                seen.add(key)
                certs.append(cert)
    return certs
