"""Tests for batch resume screening."""

import pytest

from talent_match.config import AppConfig, SemanticConfig
from talent_match.matching.embedding_client import EmbeddingError
from talent_match.pipeline import load_job, screen_resume, screen_resumes
from talent_match.profile.models import CandidateStatus

JOB_TEXT = """Senior Backend Engineer
5+ years of experience with Python, Django and PostgreSQL.
Bachelor's degree in Computer Science.
"""

STRONG_RESUME = """Jane Doe
jane.doe@example.com
8 years of experience building Python and Django services on PostgreSQL.
B.S. Computer Science
"""

WEAK_RESUME = """John Roe
john.roe@example.com
Pastry chef with a love of bread.
"""


@pytest.fixture
def files(tmp_path):
    job = tmp_path / "job.txt"
    job.write_text(JOB_TEXT, encoding="utf-8")
    strong = tmp_path / "jane.txt"
    strong.write_text(STRONG_RESUME, encoding="utf-8")
    weak = tmp_path / "john.txt"
    weak.write_text(WEAK_RESUME, encoding="utf-8")
    return {"job": str(job), "strong": str(strong), "weak": str(weak), "dir": tmp_path}


class TestScreening:
    def test_load_job(self, files):
        job = load_job(files["job"], AppConfig(), "Initech")
        assert job.title == "Senior Backend Engineer"
        assert job.company == "Initech"
        assert job.embedding is None

    def test_load_job_uses_default_company(self, files):
        config = AppConfig()
        config.screening.default_company = "Globex"
        assert load_job(files["job"], config).company == "Globex"

    def test_screen_resume(self, files):
        config = AppConfig()
        job = load_job(files["job"], config)
        screened = screen_resume(files["strong"], job, config)
        assert screened.file_name == "jane.txt"
        assert screened.profile.name == "Jane Doe"
        assert screened.status is CandidateStatus.NEW
        assert screened.result.score.skill_match == 100

    def test_ranked_by_overall(self, files):
        config = AppConfig()
        job = load_job(files["job"], config)
        report = screen_resumes(job, [files["weak"], files["strong"]], config)
        assert [c.file_name for c in report.candidates] == ["jane.txt", "john.txt"]
        assert report.candidates[0].result.score.overall > report.candidates[1].result.score.overall
        assert report.failures == []

    def test_unreadable_documents_become_failures(self, files):
        bad = files["dir"] / "scan.xls"
        bad.write_bytes(b"\x00\x01")
        config = AppConfig()
        job = load_job(files["job"], config)
        report = screen_resumes(job, [files["strong"], str(bad), "/nonexistent/cv.pdf"], config)
        assert [c.file_name for c in report.candidates] == ["jane.txt"]
        assert sorted(f.file_name for f in report.failures) == ["cv.pdf", "scan.xls"]

    def test_directory_path_becomes_failure(self, files):
        folder = files["dir"] / "folder.txt"
        folder.mkdir()
        config = AppConfig()
        job = load_job(files["job"], config)
        report = screen_resumes(job, [files["strong"], str(folder)], config)
        assert [c.file_name for c in report.candidates] == ["jane.txt"]
        assert [f.file_name for f in report.failures] == ["folder.txt"]

    def test_no_files(self, files):
        config = AppConfig()
        job = load_job(files["job"], config)
        report = screen_resumes(job, [], config)
        assert report.candidates == []

    def test_candidate_to_dict(self, files):
        config = AppConfig()
        job = load_job(files["job"], config)
        data = screen_resume(files["strong"], job, config).to_dict()
        assert data["status"] == "new"
        assert data["score"]["skill_match"] == 100
        assert data["semantic_score"] is None


class TestSemanticScreening:
    @pytest.fixture
    def config(self):
        return AppConfig(semantic=SemanticConfig(enabled=True))

    def test_semantic_scores_applied(self, files, config, monkeypatch):
        vectors = {"query": [1.0, 0.0], "passage": [0.6, 0.8]}
        monkeypatch.setattr(
            "talent_match.pipeline.generate_embedding",
            lambda text, role, semantic: vectors[role],
        )
        job = load_job(files["job"], config)
        assert job.embedding == (1.0, 0.0)

        report = screen_resumes(job, [files["strong"]], config)
        result = report.candidates[0].result
        assert result.semantic_score == 60
        assert result.score.overall == 60

    def test_embedding_failure_falls_back(self, files, config, monkeypatch):
        def fail(text, role, semantic):
            raise EmbeddingError("Embedding server is not reachable")

        monkeypatch.setattr("talent_match.pipeline.generate_embedding", fail)
        job = load_job(files["job"], config)
        assert job.embedding is None

        report = screen_resumes(job, [files["strong"]], config)
        assert report.candidates[0].result.semantic_score is None
