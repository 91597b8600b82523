"""Score data model."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ScoringWeights:
    """Share of each dimension in the overall score. Must sum to 1.0."""

    skill: float = 0.40
    experience: float = 0.30
    education: float = 0.15
    keyword: float = 0.15

    @property
    def total(self) -> float:
        return self.skill + self.experience + self.education + self.keyword


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass(frozen=True)
class ScoreBreakdown:
    overall: int = 0
    skill_match: int = 0
    experience_match: int = 0
    education_match: int = 0
    keyword_match: int = 0

    def to_dict(self) -> dict:
        return {
            "overall": self.overall,
            "skill_match": self.skill_match,
            "experience_match": self.experience_match,
            "education_match": self.education_match,
            "keyword_match": self.keyword_match,
        }


@dataclass(frozen=True)
class ScoringResult:
    score: ScoreBreakdown
    improvements: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()
    semantic_score: Optional[int] = None  # set when embeddings replaced overall

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "score": self.score.to_dict(),
            "improvements": list(self.improvements),
            "strengths": list(self.strengths),
            "semantic_score": self.semantic_score,
        }
