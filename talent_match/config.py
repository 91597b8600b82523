"""YAML config loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from talent_match.matching.models import ScoringWeights

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ScoringConfig:
    skill_weight: float = 0.40
    experience_weight: float = 0.30
    education_weight: float = 0.15
    keyword_weight: float = 0.15

    def weights(self) -> ScoringWeights:
        return ScoringWeights(
            skill=self.skill_weight,
            experience=self.experience_weight,
            education=self.education_weight,
            keyword=self.keyword_weight,
        )


@dataclass
class SemanticConfig:
    enabled: bool = False
    embedding_url: str = "http://localhost:5001"
    timeout: int = 30
    max_retries: int = 2
    expected_dimension: int = 1024  # BGE-large
    replace_overall: bool = True  # False records the semantic score without overriding


@dataclass
class InterviewConfig:
    openai_api_key: str = ""
    model: str = "gpt-4o-mini"
    temperature: float = 0.5


@dataclass
class ScreeningConfig:
    max_workers: int = 4
    default_company: str = "Company Name"


@dataclass
class AppConfig:
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    semantic: SemanticConfig = field(default_factory=SemanticConfig)
    interview: InterviewConfig = field(default_factory=InterviewConfig)
    screening: ScreeningConfig = field(default_factory=ScreeningConfig)
    log_dir: str = "logs"
    log_level: str = "INFO"


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load and validate configuration from YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and adjust your settings."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig()

    # Scoring weights
    scoring_raw = raw.get("scoring", {})
    config.scoring = ScoringConfig(
        skill_weight=scoring_raw.get("skill_weight", 0.40),
        experience_weight=scoring_raw.get("experience_weight", 0.30),
        education_weight=scoring_raw.get("education_weight", 0.15),
        keyword_weight=scoring_raw.get("keyword_weight", 0.15),
    )

    # Semantic scoring (env var takes precedence for the server URL)
    semantic_raw = raw.get("semantic", {})
    config.semantic = SemanticConfig(
        enabled=semantic_raw.get("enabled", False),
        embedding_url=os.environ.get(
            "EMBEDDING_SERVER_URL", semantic_raw.get("embedding_url", "http://localhost:5001")
        ),
        timeout=semantic_raw.get("timeout", 30),
        max_retries=semantic_raw.get("max_retries", 2),
        expected_dimension=semantic_raw.get("expected_dimension", 1024),
        replace_overall=semantic_raw.get("replace_overall", True),
    )

    # Interview prep
    interview_raw = raw.get("interview", {})
    config.interview = InterviewConfig(
        openai_api_key=os.environ.get("OPENAI_API_KEY", interview_raw.get("openai_api_key", "")),
        model=interview_raw.get("model", "gpt-4o-mini"),
        temperature=interview_raw.get("temperature", 0.5),
    )

    screening_raw = raw.get("screening", {})
    config.screening = ScreeningConfig(
        max_workers=screening_raw.get("max_workers", 4),
        default_company=screening_raw.get("default_company", "Company Name"),
    )

    config.log_dir = raw.get("log_dir", "logs")
    config.log_level = str(raw.get("log_level", "INFO")).upper()

    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    weights = config.scoring.weights()
    if min(weights.skill, weights.experience, weights.education, weights.keyword) < 0:
        warnings.append("Scoring weights must not be negative")
    if abs(weights.total - 1.0) > 1e-6:
        warnings.append(f"Scoring weights sum to {weights.total:.2f}, expected 1.0 - overall scores will be skewed")

    if config.semantic.enabled and not config.semantic.embedding_url:
        warnings.append("Semantic scoring enabled but no embedding server URL configured - heuristic scores only")

    if config.log_level not in LOG_LEVELS:
        warnings.append(f"Unknown log_level {config.log_level!r} - using INFO")

    if config.screening.max_workers < 1:
        warnings.append("screening.max_workers must be at least 1 - using a single worker")

    if not config.interview.openai_api_key:
        warnings.append("No OpenAI API key configured - interview prep will be unavailable")

    return warnings
