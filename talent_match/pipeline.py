"""Batch screening: parse a job posting, then extract, parse and score resumes."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from talent_match.config import AppConfig
from talent_match.documents.text_extractor import DocumentError, extract_text
from talent_match.jobs.job_parser import parse_job_description
from talent_match.jobs.models import JobProfile
from talent_match.matching.embedding_client import EmbeddingError, generate_embedding
from talent_match.matching.matcher import score_candidate
from talent_match.matching.models import ScoringResult
from talent_match.profile.models import CandidateProfile, CandidateStatus
from talent_match.profile.resume_parser import parse_resume

logger = logging.getLogger("talent_match.pipeline")


@dataclass
class ScreenedCandidate:
    file_name: str
    profile: CandidateProfile
    result: ScoringResult
    status: CandidateStatus = CandidateStatus.NEW

    def to_dict(self) -> dict:
        return {
            "file_name": self.file_name,
            "status": self.status.value,
            "profile": self.profile.to_dict(),
            **self.result.to_dict(),
        }


@dataclass
class ScreeningFailure:
    file_name: str
    message: str


@dataclass
class ScreeningReport:
    job: JobProfile
    candidates: list[ScreenedCandidate] = field(default_factory=list)
    failures: list[ScreeningFailure] = field(default_factory=list)


def _embed(text: str, role: str, config: AppConfig) -> Optional[list[float]]:
    """Embedding for text, or None when the server fails (heuristics still apply)."""
    try:
        return generate_embedding(text, role, config.semantic)
    except EmbeddingError as e:
        logger.warning("Embedding generation failed, using heuristic score: %s", e)
        return None


def load_job(file_path: str, config: AppConfig, company: Optional[str] = None) -> JobProfile:
    """Extract and parse a job posting file. Raises DocumentError if unreadable."""
    text = extract_text(file_path)
    job = parse_job_description(text, company or config.screening.default_company)

    if config.semantic.enabled:
        embedding = _embed(job.raw_text, "query", config)
        if embedding is not None:
            job = job.with_embedding(embedding)
    return job


def screen_resume(
    file_path: str,
    job: JobProfile,
    config: AppConfig,
    current_year: Optional[int] = None,
) -> ScreenedCandidate:
    """Extract, parse and score one resume file against a job."""
    file_name = Path(file_path).name
    text = extract_text(file_path)
    profile = parse_resume(text, file_name)

    if config.semantic.enabled and job.embedding is not None:
        embedding = _embed(profile.raw_text, "passage", config)
        if embedding is not None:
            profile = profile.with_embedding(embedding)

    result = score_candidate(profile, job, config, current_year)
    logger.info("Scored %s (%s): %d", profile.name, file_name, result.score.overall)
    return ScreenedCandidate(file_name=file_name, profile=profile, result=result)


def screen_resumes(
    job: JobProfile,
    file_paths: Iterable[str],
    config: AppConfig,
    current_year: Optional[int] = None,
) -> ScreeningReport:
    """Screen resumes in parallel and rank them by overall score.

    Unreadable documents are reported as failures; the rest are still scored.
    """
    paths = list(file_paths)
    report = ScreeningReport(job=job)
    if not paths:
        return report

    workers = max(1, min(config.screening.max_workers, len(paths)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            (path, pool.submit(screen_resume, path, job, config, current_year))
            for path in paths
        ]
        for path, future in futures:
            try:
                report.candidates.append(future.result())
            except (DocumentError, FileNotFoundError) as e:
                logger.warning("Skipping %s: %s", Path(path).name, e)
                report.failures.append(ScreeningFailure(file_name=Path(path).name, message=str(e)))

    report.candidates.sort(key=lambda c: (-c.result.score.overall, c.file_name))
    logger.info(
        "Screened %d resumes for '%s': %d scored, %d failed",
        len(paths), job.title, len(report.candidates), len(report.failures),
    )
    return report
