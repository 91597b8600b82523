"""Heuristic candidate/job scoring.

Four dimensions, each 0-100, combined with fixed weights:

- skills: share of the job's required skills the candidate lists
- experience: estimated years against required years
- education: share of required degree tiers the resume mentions
- keywords: share of the posting's keywords found in the resume text

Inputs may be profile objects or stored mappings (snake_case or camelCase
keys); malformed fields count as empty rather than failing.
"""

import logging
import re
from typing import Any, Mapping, Optional, Sequence

from talent_match.matching.models import DEFAULT_WEIGHTS, ScoreBreakdown, ScoringResult, ScoringWeights
from talent_match.utils.taxonomy import DEGREE_SYNONYMS
from talent_match.utils.text_processing import (
    clamp_percent,
    extract_years_experience,
    round_half_up,
    sum_year_ranges,
)

logger = logging.getLogger("talent_match.matching.scoring")

YEARS_PER_EXPERIENCE_ENTRY = 1.5
MAX_MISSING_SKILLS_LISTED = 5

# Improvement triggers: a dimension below its threshold gets advice.
IMPROVEMENT_THRESHOLD = 80
KEYWORD_IMPROVEMENT_THRESHOLD = 70
STRENGTH_THRESHOLD = 80

_DEGREE_SYNONYM_PATTERNS = tuple(
    (label, tuple(re.compile(rf"(?<![a-z0-9]){re.escape(s)}") for s in synonyms))
    for label, synonyms in DEGREE_SYNONYMS
)


def calculate_score(
    candidate: Any,
    job: Any,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    current_year: Optional[int] = None,
) -> ScoringResult:
    """Score a candidate profile against a job profile."""
    candidate_skills = _strings(_get(candidate, "skills"))
    raw_text = _text(_get(candidate, "raw_text", "rawText"))
    experience_entries = _sequence(_get(candidate, "experience"))

    requirements = _get(job, "requirements")
    required_skills = _strings(_get(requirements, "skills"))
    required_years = _number(_get(requirements, "experience"))
    required_education = _strings(_get(requirements, "education"))
    keywords = _strings(_get(job, "keywords"))

    skill = skill_match(candidate_skills, required_skills)
    experience = experience_match(len(experience_entries), required_years, raw_text, current_year)
    education = education_match(required_education, raw_text)
    keyword = keyword_match(raw_text, keywords)

    overall = clamp_percent(
        skill * weights.skill
        + experience * weights.experience
        + education * weights.education
        + keyword * weights.keyword
    )
    score = ScoreBreakdown(
        overall=overall,
        skill_match=skill,
        experience_match=experience,
        education_match=education,
        keyword_match=keyword,
    )

    logger.debug(
        "Scored candidate: overall=%d skills=%d experience=%d education=%d keywords=%d",
        overall, skill, experience, education, keyword,
    )

    return ScoringResult(
        score=score,
        improvements=tuple(_improvements(score, candidate_skills, required_skills, required_education)),
        strengths=tuple(_strengths(score)),
    )


def _skill_covered(required: str, candidate_lower: Sequence[str]) -> bool:
    req = required.lower().strip()
    return any(cs == req or req in cs or cs in req for cs in candidate_lower)


def skill_match(candidate_skills: Sequence[str], required_skills: Sequence[str]) -> int:
    """Percent of required skills the candidate covers.

    A required skill is covered when a candidate skill equals it or either
    contains the other. 0 when either list is empty.
    """
    if not required_skills or not candidate_skills:
        return 0

    candidate_lower = [s.lower().strip() for s in candidate_skills if s.strip()]
    matched = sum(
        1 for req in required_skills
        if req.strip() and _skill_covered(req, candidate_lower)
    )
    return clamp_percent(100 * matched / len(required_skills))


def estimate_years(
    raw_text: str,
    experience_entries: int = 0,
    current_year: Optional[int] = None,
) -> int:
    """Best-effort years of experience for a resume.

    Stated years ("7 years of experience") win; otherwise the summed year
    ranges; otherwise 1.5 years per extracted experience entry.
    """
    stated = extract_years_experience(raw_text)
    if stated is not None:
        return stated

    years = sum_year_ranges(raw_text, current_year)
    if years == 0 and experience_entries > 0:
        years = round_half_up(experience_entries * YEARS_PER_EXPERIENCE_ENTRY)
    return years


def experience_match(
    experience_entries: int,
    required_years: float,
    raw_text: str,
    current_year: Optional[int] = None,
) -> int:
    if required_years <= 0:
        return 100

    years = estimate_years(raw_text, experience_entries, current_year)
    if years >= required_years:
        return 100
    return clamp_percent(100 * years / required_years)


def education_match(required_education: Sequence[str], raw_text: str) -> int:
    """Percent of required degree tiers the resume text mentions."""
    if not required_education:
        return 100

    text_lower = raw_text.lower()
    matched = 0
    for requirement in required_education:
        req_lower = requirement.lower()
        if req_lower and req_lower in text_lower:
            matched += 1
            continue
        for _, patterns in _DEGREE_SYNONYM_PATTERNS:
            if any(p.search(req_lower) for p in patterns) and any(p.search(text_lower) for p in patterns):
                matched += 1
                break
    return clamp_percent(100 * matched / len(required_education))


def keyword_match(raw_text: str, keywords: Sequence[str]) -> int:
    """Percent of job keywords found in the resume text, each counted once."""
    if not keywords or not raw_text:
        return 0

    text_lower = raw_text.lower()
    matched = {kw.lower().strip() for kw in keywords if kw.strip() and kw.lower().strip() in text_lower}
    return clamp_percent(100 * len(matched) / len(keywords))


def missing_skills(candidate_skills: Sequence[str], required_skills: Sequence[str]) -> list[str]:
    candidate_lower = [s.lower().strip() for s in candidate_skills if s.strip()]
    return [req for req in required_skills if req.strip() and not _skill_covered(req, candidate_lower)]


def _improvements(
    score: ScoreBreakdown,
    candidate_skills: Sequence[str],
    required_skills: Sequence[str],
    required_education: Sequence[str],
) -> list[str]:
    improvements = []

    if score.skill_match < IMPROVEMENT_THRESHOLD and required_skills:
        missing = missing_skills(candidate_skills, required_skills)
        if missing:
            improvements.append(f"Missing key skills: {', '.join(missing[:MAX_MISSING_SKILLS_LISTED])}")

    if score.experience_match < IMPROVEMENT_THRESHOLD:
        improvements.append("Consider highlighting more relevant experience for this role")

    if score.education_match < IMPROVEMENT_THRESHOLD and required_education:
        improvements.append("Education requirements may not be fully met")

    if score.keyword_match < KEYWORD_IMPROVEMENT_THRESHOLD:
        improvements.append("Resume could benefit from more role-specific keywords")

    return improvements


def _strengths(score: ScoreBreakdown) -> list[str]:
    strengths = []
    if score.skill_match >= STRENGTH_THRESHOLD:
        strengths.append("Strong skill match with job requirements")
    if score.experience_match >= STRENGTH_THRESHOLD:
        strengths.append("Relevant experience level for the position")
    if score.keyword_match >= STRENGTH_THRESHOLD:
        strengths.append("Good keyword optimization")
    if score.education_match >= STRENGTH_THRESHOLD:
        strengths.append("Education requirements met")
    return strengths


# Tolerant field access over profiles and stored mappings.

def _get(obj: Any, *names: str) -> Any:
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, Mapping):
            if name in obj:
                return obj[name]
        elif hasattr(obj, name):
            return getattr(obj, name)
    return None


def _sequence(value: Any) -> list:
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return []


def _strings(value: Any) -> list[str]:
    items = _sequence(value)
    if isinstance(value, (set, frozenset)):
        items = sorted(items, key=str)
    return [item for item in items if isinstance(item, str)]


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value
