"""Matcher facade: heuristic scoring with optional semantic override."""

import logging
from dataclasses import replace
from typing import Optional

from talent_match.config import AppConfig
from talent_match.jobs.models import JobProfile
from talent_match.matching.models import ScoringResult
from talent_match.matching.scoring_engine import calculate_score
from talent_match.matching.semantic import DimensionMismatch, score_from_embeddings
from talent_match.profile.models import CandidateProfile

logger = logging.getLogger("talent_match.matching")


def score_candidate(
    candidate: CandidateProfile,
    job: JobProfile,
    config: AppConfig,
    current_year: Optional[int] = None,
) -> ScoringResult:
    """Score a candidate against a job.

    When semantic scoring is enabled and both profiles carry embeddings, the
    embedding similarity replaces the overall score (it is never blended).
    The four heuristic dimensions are always kept for display.
    """
    result = calculate_score(candidate, job, config.scoring.weights(), current_year)

    if not config.semantic.enabled:
        return result
    if candidate.embedding is None or job.embedding is None:
        logger.debug("Semantic scoring skipped for %s: missing embedding", candidate.name)
        return result

    try:
        semantic = score_from_embeddings(job.embedding, candidate.embedding)
    except DimensionMismatch as e:
        logger.warning("Semantic scoring skipped for %s: %s", candidate.name, e)
        return result

    if not config.semantic.replace_overall:
        return replace(result, semantic_score=semantic)

    logger.debug(
        "Semantic override for %s: %d -> %d", candidate.name, result.score.overall, semantic,
    )
    return replace(
        result,
        score=replace(result.score, overall=semantic),
        semantic_score=semantic,
    )
