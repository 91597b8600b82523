"""Candidate name extraction.

Resumes have no fixed layout, so the name is found by an ordered chain of
strategies, each aimed at one common layout and ordered from highest to lowest
precision:

1. header line ("Jane Doe | +1 555 123 4567 | jane@doe.io")
2. standalone mixed-case line ("Jane Anne Doe" in a sidebar)
3. standalone all-caps banner ("JANE DOE")
4. any short name-like line near the top
5. the uploaded file name ("Jane_Doe_Resume.pdf")
6. the email local part ("jane.doe@example.com")
7. the file name again, accepting a single word

The first strategy that returns a value wins; otherwise the name is "Unknown".
"""

import re
from typing import Callable, Optional

from talent_match.profile.models import UNKNOWN_NAME
from talent_match.utils.taxonomy import JOB_TITLE_WORDS, SECTION_WORDS, TECH_TERMS
from talent_match.utils.text_processing import to_title_case

NameStrategy = Callable[[list[str], str, Optional[str]], Optional[str]]

_HEADER_SEPARATORS = re.compile(r"[|·•\t]")
_NAME_TOKEN = re.compile(r"^[A-Za-z'-]+$")
_MIXED_CASE_NAME = re.compile(r"^[A-Z][a-z]+(?:\s+[A-Z][a-z]+){1,3}$")
_ALL_CAPS_NAME = re.compile(r"^[A-Z][A-Z'-]+(?:\s+[A-Z][A-Z'-]+){1,3}$")
_SECTION_LINE = re.compile(rf"^(?:{'|'.join(SECTION_WORDS)})\b", re.IGNORECASE)
_UPLOAD_PREFIX = re.compile(r"^resume_\d+_", re.IGNORECASE)
_COPY_COUNTER = re.compile(r"\s*\(\d+\)\s*")


def _is_name_like(text: str) -> bool:
    words = text.split()
    if not 2 <= len(words) <= 4:
        return False
    return all(_NAME_TOKEN.match(w) and len(w) >= 2 for w in words)


def _has_title_words(text: str) -> bool:
    lowered = text.lower()
    return any(word in lowered for word in JOB_TITLE_WORDS)


def _is_non_name_line(line: str) -> bool:
    """Lines that can never hold a name in the standalone-line strategies."""
    if not 3 <= len(line) <= 50:
        return True
    if "@" in line or "://" in line or line.lower().startswith("www."):
        return True
    if re.match(r"^[+\d().\-\s]{7,}$", line):
        return True
    if re.search(r"[:,;|•·/\\]", line) or line[0].isdigit():
        return True
    if _SECTION_LINE.match(line):
        return True
    lowered = line.lower()
    if sum(1 for term in TECH_TERMS if term in lowered) >= 2:
        return True
    return _has_title_words(line)


def _title_case_tokens(words: list[str]) -> str:
    """Title-case each token, keeping tokens that are already mixed case."""
    cased = []
    for word in words:
        if any(c.islower() for c in word) and any(c.isupper() for c in word):
            cased.append(word)
        else:
            cased.append(word[:1].upper() + word[1:].lower())
    return " ".join(cased)


def _file_name_tokens(file_name: str) -> list[str]:
    base = re.sub(r"\.[^.]+$", "", file_name)
    base = _UPLOAD_PREFIX.sub("", base)
    segment = _COPY_COUNTER.sub(" ", base.split("_")[0]).strip()
    return [w for w in segment.split() if _NAME_TOKEN.match(w) and len(w) >= 2]


def from_header_line(lines: list[str], email: str, file_name: Optional[str]) -> Optional[str]:
    non_empty = [line for line in lines if line]
    for line in non_empty[:5]:
        # "Skills: Python, Go" style content lines
        if re.search(r":\s+\S", line) and "|" not in line:
            continue

        segments = [s.strip() for s in _HEADER_SEPARATORS.split(line) if s.strip()]
        if not segments:
            continue

        candidate = segments[0]
        candidate = re.sub(r"\+?\d[\d\s().-]{8,}", "", candidate)
        candidate = re.sub(r"\b[A-Za-z0-9._%+-]+@\S+", "", candidate)
        candidate = re.sub(r",\s*[A-Z]{2}\b.*$", "", candidate)
        candidate = re.sub(r",.*$", "", candidate)
        candidate = re.sub(r"\b\d{5,}\b.*$", "", candidate).strip()

        words = [w for w in candidate.split() if _NAME_TOKEN.match(w) and 2 <= len(w) <= 12]
        if not 2 <= len(words) <= 4:
            continue

        name = " ".join(words)
        if _has_title_words(name) or _SECTION_LINE.match(name):
            continue
        if re.match(r"^[A-Z\s'-]+$", name):
            return to_title_case(name)
        if _is_name_like(name):
            return name
    return None


def from_mixed_case_line(lines: list[str], email: str, file_name: Optional[str]) -> Optional[str]:
    for line in lines:
        if line and not _is_non_name_line(line) and _MIXED_CASE_NAME.match(line):
            return line
    return None


def from_all_caps_line(lines: list[str], email: str, file_name: Optional[str]) -> Optional[str]:
    for line in lines:
        if not line or _is_non_name_line(line):
            continue
        if len(line) <= 40 and _ALL_CAPS_NAME.match(line):
            return to_title_case(line)
    return None


def from_early_line(lines: list[str], email: str, file_name: Optional[str]) -> Optional[str]:
    for line in lines[:15]:
        if line and not _is_non_name_line(line) and _is_name_like(line):
            return line
    return None


def from_file_name(lines: list[str], email: str, file_name: Optional[str]) -> Optional[str]:
    if not file_name:
        return None
    words = _file_name_tokens(file_name)
    if not 2 <= len(words) <= 4:
        return None
    name = _title_case_tokens(words)
    return None if _has_title_words(name) else name


def from_email(lines: list[str], email: str, file_name: Optional[str]) -> Optional[str]:
    if not email:
        return None
    local_part = email.split("@")[0]
    parts = [p for p in re.split(r"[._-]", local_part) if len(p) > 1 and re.fullmatch(r"[A-Za-z]+", p)]
    if len(parts) < 2:
        return None
    return " ".join(p[:1].upper() + p[1:].lower() for p in parts)


def from_file_name_relaxed(lines: list[str], email: str, file_name: Optional[str]) -> Optional[str]:
    if not file_name:
        return None
    words = _file_name_tokens(file_name)
    if not 1 <= len(words) <= 4:
        return None
    return _title_case_tokens(words)


NAME_STRATEGIES: tuple[NameStrategy, ...] = (
    from_header_line,
    from_mixed_case_line,
    from_all_caps_line,
    from_early_line,
    from_file_name,
    from_email,
    from_file_name_relaxed,
)


def extract_name(lines: list[str], email: str = "", file_name: Optional[str] = None) -> str:
    """Run the strategy chain over stripped resume lines."""
    for strategy in NAME_STRATEGIES:
        name = strategy(lines, email, file_name)
        if name:
            return name
    return UNKNOWN_NAME
