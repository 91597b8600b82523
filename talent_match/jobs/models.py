"""Job posting data model."""

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

DEFAULT_TITLE = "Position"
DEFAULT_COMPANY = "Company Name"


@dataclass(frozen=True)
class JobRequirements:
    skills: frozenset[str] = frozenset()
    experience: int = 0  # years, 0 when unstated
    education: tuple[str, ...] = ()
    certifications: tuple[str, ...] = ()


@dataclass(frozen=True)
class JobProfile:
    """Structured fields extracted from one job posting."""

    title: str = DEFAULT_TITLE
    company: str = DEFAULT_COMPANY
    description: str = ""  # preview of the first 500 characters
    requirements: JobRequirements = field(default_factory=JobRequirements)
    keywords: tuple[str, ...] = ()
    raw_text: str = ""
    embedding: Optional[tuple[float, ...]] = None

    def with_embedding(self, embedding: Sequence[float]) -> "JobProfile":
        return replace(self, embedding=tuple(float(v) for v in embedding))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "title": self.title,
            "company": self.company,
            "description": self.description,
            "requirements": {
                "skills": sorted(self.requirements.skills),
                "experience": self.requirements.experience,
                "education": list(self.requirements.education),
                "certifications": list(self.requirements.certifications),
            },
            "keywords": list(self.keywords),
            "raw_text": self.raw_text,
        }
