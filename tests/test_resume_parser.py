"""Tests for resume parser."""

import os
import tempfile

import pytest

from talent_match.profile.models import UNKNOWN_NAME, CandidateProfile
from talent_match.profile.resume_parser import (
    extract_certifications,
    extract_phone,
    parse_resume,
    parse_resume_file,
)

SAMPLE_RESUME = """John Smith
john.smith@email.com
(555) 123-4567

Summary:
Software Engineer with 7 years of experience building scalable
backend systems using Python, Java, and cloud technologies.

Experience
Senior Software Engineer 2020 - Present
Google
- Built microservices using Python and Kubernetes
- Managed AWS infrastructure with Terraform

Software Engineer 2016 - 2020
Meta
- Developed backend APIs with Java and Spring

Skills
Python, Java, Docker, Kubernetes, AWS, Terraform, PostgreSQL, Redis, Git

Education
B.S. Computer Science, Stanford University, 2016

Certifications
AWS Certified Solutions Architect - Associate
Certified Kubernetes Administrator (CKA)
"""


@pytest.fixture
def sample_resume_txt():
    """Create a sample text resume file."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False, encoding="utf-8") as f:
        f.write(SAMPLE_RESUME)
        path = f.name

    yield path
    os.unlink(path)


class TestParseResume:
    def test_contact_details(self):
        profile = parse_resume(SAMPLE_RESUME)
        assert profile.name == "John Smith"
        assert profile.personal_info.email == "john.smith@email.com"
        assert profile.personal_info.phone == "(555) 123-4567"
        assert profile.personal_info.location == ""

    def test_skills(self):
        profile = parse_resume(SAMPLE_RESUME)
        expected = {"Python", "Java", "Docker", "Kubernetes", "AWS", "Terraform", "PostgreSQL", "Redis", "Git"}
        assert expected <= profile.skills
        assert "Go" not in profile.skills

    def test_experience_entries(self):
        profile = parse_resume(SAMPLE_RESUME)
        assert len(profile.experience) == 2
        first = profile.experience[0]
        assert first.title == "Senior Software Engineer"
        assert first.company == "Google"
        assert first.duration == "2020 - Present"
        assert "microservices" in first.description
        assert profile.experience[1].company == "Meta"

    def test_education_entries(self):
        profile = parse_resume(SAMPLE_RESUME)
        assert len(profile.education) == 1
        assert profile.education[0].year == "2016"
        assert profile.education[0].institution == ""

    def test_certifications(self):
        profile = parse_resume(SAMPLE_RESUME)
        assert profile.certifications == ("AWS Certified Solutions Architect - Associate", "CKA")

    def test_raw_text_preserved(self):
        assert parse_resume(SAMPLE_RESUME).raw_text == SAMPLE_RESUME

    def test_all_caps_header(self):
        text = "JOHN SMITH\njohn.smith@mail.com\n5 years experience in Python and React"
        profile = parse_resume(text)
        assert profile.name == "John Smith"
        assert profile.skills == frozenset({"Python", "React"})

    @pytest.mark.parametrize("text", ["", "   \n\t", None, 123])
    def test_invalid_input_gives_default_profile(self, text):
        profile = parse_resume(text)
        assert profile == CandidateProfile()
        assert profile.name == UNKNOWN_NAME
        assert profile.skills == frozenset()

    def test_deterministic(self):
        assert parse_resume(SAMPLE_RESUME) == parse_resume(SAMPLE_RESUME)

    def test_to_dict_sorts_skills(self):
        data = parse_resume(SAMPLE_RESUME).to_dict()
        assert data["skills"] == sorted(data["skills"])
        assert data["personal_info"]["name"] == "John Smith"


class TestParseResumeFile:
    def test_parse_text_file(self, sample_resume_txt):
        profile = parse_resume_file(sample_resume_txt)
        assert profile.name == "John Smith"
        assert "Python" in profile.skills

    def test_name_falls_back_to_file_name(self, tmp_path):
        path = tmp_path / "resume_1700000000_Maria Lopez.txt"
        path.write_text("Skills: Python, Django\nSummary: backend developer", encoding="utf-8")
        assert parse_resume_file(str(path)).name == "Maria Lopez"

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            parse_resume_file("/nonexistent/resume.pdf")


class TestContactFields:
    def test_international_phone(self):
        assert extract_phone("Call +44 20 7946 0958 today") == "+44 20 7946 0958"

    def test_year_range_is_not_a_phone(self):
        assert extract_phone("Acme 2019-2023") == ""

    def test_parenthesized_year_range_is_not_a_phone(self):
        assert extract_phone("Jane Doe\nAcme (2016 - 2019)") == ""
        assert extract_phone("Jane Doe (555) 123-4567") == "(555) 123-4567"

    def test_short_numbers_ignored(self):
        assert extract_phone("Room 12345") == ""

    def test_certifications_deduplicated(self):
        certs = extract_certifications("PMP certified. Holds pmp and CKAD.")
        assert certs == ["PMP", "CKAD"]

    def test_cloud_vendor_certifications(self):
        text = (
            "Azure Developer Associate\n"
            "Google Cloud Professional Data Engineer\n"
            "CompTIA Security+\n"
            "Certified Scrum Master and Product Owner"
        )
        assert extract_certifications(text) == [
            "Azure Developer Associate",
            "Google Cloud Professional Data Engineer",
            "CompTIA Security",
            "Scrum Master",
            "Product Owner",
        ]

    def test_certification_tail_stays_on_its_line(self):
        certs = extract_certifications("AWS Certified Developer\nAssociate level, 2021")
        assert certs == ["AWS Certified Developer"]
