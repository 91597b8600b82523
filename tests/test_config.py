"""Tests for configuration loading."""

import os
import tempfile

import pytest
import yaml

from talent_match.config import AppConfig, ScoringConfig, load_config, validate_config
from talent_match.matching.models import ScoringWeights


@pytest.fixture
def config_file():
    """Create a temporary config file."""
    config_data = {
        "scoring": {
            "skill_weight": 0.5,
            "experience_weight": 0.2,
            "education_weight": 0.1,
            "keyword_weight": 0.2,
        },
        "semantic": {"enabled": True, "embedding_url": "http://gpu-box:5001", "timeout": 10},
        "interview": {"openai_api_key": "sk-test", "model": "gpt-4o"},
        "screening": {"max_workers": 8, "default_company": "Initech"},
        "log_dir": "/tmp/talent-logs",
    }

    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump(config_data, f)
        path = f.name

    yield path
    os.unlink(path)


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv("EMBEDDING_SERVER_URL", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


class TestLoadConfig:
    def test_loads_valid_config(self, config_file):
        config = load_config(config_file)
        assert config.scoring.skill_weight == 0.5
        assert config.semantic.enabled is True
        assert config.semantic.embedding_url == "http://gpu-box:5001"
        assert config.semantic.timeout == 10
        assert config.interview.model == "gpt-4o"
        assert config.screening.max_workers == 8
        assert config.screening.default_company == "Initech"
        assert config.log_dir == "/tmp/talent-logs"

    def test_missing_file_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")

    def test_defaults_for_missing_sections(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("log_dir: logs\n")
        config = load_config(str(path))
        assert config.scoring == ScoringConfig()
        assert config.semantic.enabled is False
        assert config.semantic.embedding_url == "http://localhost:5001"
        assert config.semantic.replace_overall is True
        assert config.interview.openai_api_key == ""

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == AppConfig()

    def test_env_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("EMBEDDING_SERVER_URL", "http://env-host:9000")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        config = load_config(config_file)
        assert config.semantic.embedding_url == "http://env-host:9000"
        assert config.interview.openai_api_key == "sk-env"


class TestValidateConfig:
    def test_valid_config(self, config_file):
        assert validate_config(load_config(config_file)) == []

    def test_default_config_warns_about_openai(self):
        warnings = validate_config(AppConfig())
        assert warnings == ["No OpenAI API key configured - interview prep will be unavailable"]

    def test_weights_must_sum_to_one(self):
        config = AppConfig()
        config.interview.openai_api_key = "sk-test"
        config.scoring.skill_weight = 0.9
        warnings = validate_config(config)
        assert any("sum to 1.50" in w for w in warnings)

    def test_negative_weight(self):
        config = AppConfig(scoring=ScoringConfig(skill_weight=-0.1, experience_weight=0.6))
        assert "Scoring weights must not be negative" in validate_config(config)

    def test_semantic_without_url(self):
        config = AppConfig()
        config.semantic.enabled = True
        config.semantic.embedding_url = ""
        assert any("no embedding server URL" in w for w in validate_config(config))

    def test_workers(self):
        config = AppConfig()
        config.screening.max_workers = 0
        assert any("max_workers" in w for w in validate_config(config))


class TestScoringWeights:
    def test_weights_from_config(self):
        assert ScoringConfig().weights() == ScoringWeights()
        assert ScoringWeights().total == pytest.approx(1.0)

    def test_unknown_log_level(self):
        config = AppConfig()
        config.interview.openai_api_key = "sk-test"
        config.log_level = "LOUD"
        assert validate_config(config) == ["Unknown log_level 'LOUD' - using INFO"]
