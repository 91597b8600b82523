"""Candidate profile data model."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence

UNKNOWN_NAME = "Unknown"


class CandidateStatus(str, Enum):
    """Reviewer decision stored alongside a scored candidate."""

    NEW = "new"
    SHORTLISTED = "shortlisted"
    HOLD = "hold"
    REJECTED = "rejected"


@dataclass(frozen=True)
class PersonalInfo:
    name: str = UNKNOWN_NAME
    email: str = ""
    phone: str = ""
    location: str = ""  # never extracted


@dataclass(frozen=True)
class ExperienceEntry:
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""


@dataclass(frozen=True)
class EducationEntry:
    degree: str = ""
    institution: str = ""  # never extracted
    year: str = ""


@dataclass(frozen=True)
class CandidateProfile:
    """Structured fields extracted from one resume."""

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    skills: frozenset[str] = frozenset()
    certifications: tuple[str, ...] = ()
    raw_text: str = ""
    embedding: Optional[tuple[float, ...]] = None

    @property
    def name(self) -> str:
        return self.personal_info.name

    def with_embedding(self, embedding: Sequence[float]) -> "CandidateProfile":
        """Copy of this profile carrying an embedding from the embedding service."""
        return replace(self, embedding=tuple(float(v) for v in embedding))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "personal_info": {
                "name": self.personal_info.name,
                "email": self.personal_info.email,
                "phone": self.personal_info.phone,
                "location": self.personal_info.location,
            },
            "experience": [
                {
                    "title": e.title,
                    "company": e.company,
                    "duration": e.duration,
                    "description": e.description,
                }
                for e in self.experience
            ],
            "education": [
                {"degree": e.degree, "institution": e.institution, "year": e.year}
                for e in self.education
            ],
            "skills": sorted(self.skills),
            "certifications": list(self.certifications),
            "raw_text": self.raw_text,
        }
