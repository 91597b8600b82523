"""Skill extraction, keyword extraction, and text utilities."""

import math
import re
from datetime import date

from talent_match.utils.taxonomy import (
    DEGREE_TIERS,
    SHORT_SKILL_MAX_LEN,
    SKILL_KEYWORDS,
    STOP_WORDS,
)

MAX_KEYWORDS = 40

# "2018 - 2022", "2019 to present", "2021–now"
YEAR_RANGE_PATTERN = re.compile(
    r"\b(20\d{2}|19\d{2})\s*[-–—to]+\s*(20\d{2}|19\d{2}|present|current|now)\b",
    re.IGNORECASE,
)

_YEARS_OF_EXPERIENCE_PATTERNS = (
    re.compile(r"(\d+)\+?\s*years?\s*(?:of\s+)?(?:experience|exp)", re.IGNORECASE),
    re.compile(r"experience\s*(?:of\s+)?(\d+)\+?\s*years?", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*years?\s*(?:in|working|professional)", re.IGNORECASE),
)


def _skill_pattern(label: str) -> re.Pattern:
    escaped = re.escape(label.lower())
    if len(label) <= SHORT_SKILL_MAX_LEN:
        return re.compile(rf"(?<![a-z0-9]){escaped}(?![a-z0-9])")
    return re.compile(escaped)


_SKILL_PATTERNS = tuple((label, _skill_pattern(label)) for label in SKILL_KEYWORDS)


def extract_skills(text: str) -> frozenset[str]:
    """Return the canonical taxonomy labels mentioned in text."""
    if not text:
        return frozenset()
    text_lower = text.lower()
    return frozenset(label for label, pattern in _SKILL_PATTERNS if pattern.search(text_lower))


def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> list[str]:
    """Extract distinct content words in order of first appearance."""
    if not text:
        return []

    keywords = []
    seen = set()
    for word in re.split(r"\W+", text.lower()):
        if len(word) <= 3 or word in STOP_WORDS or word.isdigit() or word in seen:
            continue
        seen.add(word)
        keywords.append(word)
        if len(keywords) >= limit:
            break
    return keywords


def extract_years_experience(text: str) -> int | None:
    """Largest "N years of experience" style figure stated in text."""
    if not text:
        return None
    values = [
        int(match.group(1))
        for pattern in _YEARS_OF_EXPERIENCE_PATTERNS
        for match in pattern.finditer(text)
    ]
    return max(values) if values else None


def sum_year_ranges(text: str, current_year: int | None = None) -> int:
    """Total span in years of every year range found in text.

    Open-ended ranges ("2022 - present") run to current_year, which defaults
    to today's year.
    """
    if current_year is None:
        current_year = date.today().year

    total = 0
    for match in YEAR_RANGE_PATTERN.finditer(text or ""):
        start, end = match.group(1), match.group(2)
        end_year = int(end) if end.isdigit() else current_year
        total += max(0, end_year - int(start))
    return total


def degree_labels(text: str) -> list[str]:
    """Labels of every degree tier mentioned in text, highest tier first."""
    text_lower = (text or "").lower()
    return [label for label, pattern in DEGREE_TIERS if pattern.search(text_lower)]


def to_title_case(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split())


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive scores (12.5 -> 13)."""
    return int(math.floor(value + 0.5))


def clamp_percent(value: float) -> int:
    return min(100, max(0, round_half_up(value)))
