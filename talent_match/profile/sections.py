"""Line-by-line scans over resume sections (experience, education).

A scan is a small state machine. Each non-empty line is classified first,
then the classification drives the transition:

    OUTSIDE --section heading--> IN_SECTION --dated line--> BUILDING_ENTRY
    IN_SECTION / BUILDING_ENTRY --other known heading--> DONE

Only the first matching section is read; the scan stops at the next known
heading.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from talent_match.profile.models import EducationEntry, ExperienceEntry
from talent_match.utils.text_processing import YEAR_RANGE_PATTERN

EXPERIENCE_HEADING = re.compile(
    r"^(?:experience|employment|work\s*history|professional\s*experience)\b", re.IGNORECASE
)
EXPERIENCE_END = re.compile(
    r"^(?:education|skills|certifications|projects|awards|references|summary|objective)",
    re.IGNORECASE,
)
EDUCATION_HEADING = re.compile(r"^(?:education|academic|qualification|degree)", re.IGNORECASE)
EDUCATION_END = re.compile(
    r"^(?:experience|skills|certifications|projects|awards|references|work)", re.IGNORECASE
)
DEGREE_TOKEN = re.compile(
    r"\b(?:bachelor|master|phd|doctorate|associate|diploma|b\.?s\.?|m\.?s\.?|b\.?a\.?|m\.?a\.?"
    r"|b\.?tech|m\.?tech|mba|b\.?e\.?)\b",
    re.IGNORECASE,
)
YEAR_TOKEN = re.compile(r"(?:20|19)\d{2}")


class ScanState(Enum):
    OUTSIDE = auto()
    IN_SECTION = auto()
    BUILDING_ENTRY = auto()
    DONE = auto()


class LineKind(Enum):
    SECTION_HEADING = auto()
    OTHER_HEADING = auto()
    DATED = auto()
    PLAIN = auto()


def _content_lines(text: str) -> list[str]:
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


@dataclass
class _EntryDraft:
    title: str
    duration: str
    company: str = ""
    description: str = ""

    def add_line(self, line: str) -> None:
        if not self.company and 2 < len(line) < 80:
            self.company = line
        else:
            self.description = f"{self.description} {line}" if self.description else line

    def build(self) -> ExperienceEntry:
        return ExperienceEntry(
            title=self.title,
            company=self.company,
            duration=self.duration,
            description=self.description,
        )


class ExperienceScanner:
    """Collects dated job entries from the first experience section."""

    def __init__(self):
        self.state = ScanState.OUTSIDE
        self.entries: list[ExperienceEntry] = []
        self._draft: Optional[_EntryDraft] = None

    def classify(self, line: str) -> LineKind:
        if EXPERIENCE_HEADING.match(line):
            return LineKind.SECTION_HEADING
        if EXPERIENCE_END.match(line):
            return LineKind.OTHER_HEADING
        if YEAR_RANGE_PATTERN.search(line):
            return LineKind.DATED
        return LineKind.PLAIN

    def feed(self, line: str) -> None:
        kind = self.classify(line)

        if kind is LineKind.SECTION_HEADING:
            if self.state is ScanState.OUTSIDE:
                self.state = ScanState.IN_SECTION
            return
        if self.state is ScanState.OUTSIDE:
            return

        if kind is LineKind.OTHER_HEADING:
            self._close_entry()
            self.state = ScanState.DONE
        elif kind is LineKind.DATED:
            self._close_entry()
            match = YEAR_RANGE_PATTERN.search(line)
            title = YEAR_RANGE_PATTERN.sub("", line, count=1).strip(" \t|,-–—")
            self._draft = _EntryDraft(title=title, duration=match.group(0))
            self.state = ScanState.BUILDING_ENTRY
        elif self.state is ScanState.BUILDING_ENTRY:
            self._draft.add_line(line)

    def _close_entry(self) -> None:
        if self._draft is not None:
            self.entries.append(self._draft.build())
            self._draft = None

    def scan(self, text: str) -> list[ExperienceEntry]:
        for line in _content_lines(text):
            self.feed(line)
            if self.state is ScanState.DONE:
                break
        self._close_entry()
        return self.entries


class EducationScanner:
    """Collects degree lines from the first education section."""

    def __init__(self):
        self.state = ScanState.OUTSIDE
        self.entries: list[EducationEntry] = []

    def classify(self, line: str) -> LineKind:
        if EDUCATION_HEADING.match(line):
            return LineKind.SECTION_HEADING
        if EDUCATION_END.match(line):
            return LineKind.OTHER_HEADING
        return LineKind.PLAIN

    def feed(self, line: str) -> None:
        kind = self.classify(line)

        if kind is LineKind.SECTION_HEADING:
            if self.state is ScanState.OUTSIDE:
                self.state = ScanState.IN_SECTION
            return
        if self.state is ScanState.OUTSIDE:
            return

        if kind is LineKind.OTHER_HEADING:
            self.state = ScanState.DONE
        elif DEGREE_TOKEN.search(line):
            year = YEAR_TOKEN.search(line)
            self.entries.append(EducationEntry(degree=line, year=year.group(0) if year else ""))

    def scan(self, text: str) -> list[EducationEntry]:
        for line in _content_lines(text):
            self.feed(line)
            if self.state is ScanState.DONE:
                break
        return self.entries


def extract_experience(text: str) -> list[ExperienceEntry]:
    return ExperienceScanner().scan(text)


def extract_education(text: str) -> list[EducationEntry]:
    return EducationScanner().scan(text)
