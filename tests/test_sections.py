"""Tests for experience and education section scans."""

from talent_match.profile.sections import (
    EducationScanner,
    ExperienceScanner,
    LineKind,
    ScanState,
    extract_education,
    extract_experience,
)

RESUME = """Jane Doe
Experience
Senior Engineer 2019 - Present
Acme Corp
Built APIs
Led migrations
Engineer | 2016 - 2019
Globex
Education
B.S. Computer Science, 2016
Skills
Python
"""


class TestExperienceScan:
    def test_entries(self):
        entries = extract_experience(RESUME)
        assert len(entries) == 2
        assert entries[0].title == "Senior Engineer"
        assert entries[0].duration == "2019 - Present"
        assert entries[0].company == "Acme Corp"
        assert entries[0].description == "Built APIs Led migrations"
        assert entries[1].title == "Engineer"
        assert entries[1].duration == "2016 - 2019"
        assert entries[1].company == "Globex"

    def test_no_section(self):
        assert extract_experience("Senior Engineer 2019 - Present\nAcme") == []

    def test_empty_text(self):
        assert extract_experience("") == []

    def test_heading_needs_word_boundary(self):
        text = "Experienced builder\nLead 2019 - 2020\nAcme"
        assert extract_experience(text) == []

    def test_heading_prefix_ends_entry(self):
        text = "Experience\nDev 2019 - 2020\nAcme\nBuilt things\nEducational Background\nB.S. CS 2016"
        entries = extract_experience(text)
        assert len(entries) == 1
        assert entries[0].description == "Built things"
        assert extract_experience("Experience\nDev 2019 - 2020\nAcme\nSkillset\nPython")[0].description == ""

    def test_stops_at_next_heading(self):
        scanner = ExperienceScanner()
        scanner.scan(RESUME)
        assert scanner.state is ScanState.DONE

    def test_classify(self):
        scanner = ExperienceScanner()
        assert scanner.classify("Work History") is LineKind.SECTION_HEADING
        assert scanner.classify("Projects") is LineKind.OTHER_HEADING
        assert scanner.classify("Analyst 2010 to 2012") is LineKind.DATED
        assert scanner.classify("Globex") is LineKind.PLAIN


class TestEducationScan:
    def test_entries(self):
        entries = extract_education(RESUME)
        assert len(entries) == 1
        assert entries[0].degree == "B.S. Computer Science, 2016"
        assert entries[0].year == "2016"
        assert entries[0].institution == ""

    def test_lines_without_degree_ignored(self):
        text = "Education\nStanford University\nMBA 2012\nWork\nMSc 2014"
        entries = extract_education(text)
        assert [e.degree for e in entries] == ["MBA 2012"]

    def test_heading_prefix_closes_section(self):
        text = "Education\nB.S. CS 2016\nWorkshops\nMSc Data Science 2018"
        assert [e.degree for e in extract_education(text)] == ["B.S. CS 2016"]

    def test_missing_year(self):
        assert extract_education("Education\nBachelor of Arts")[0].year == ""

    def test_state_done_after_other_heading(self):
        scanner = EducationScanner()
        scanner.scan("Education\nPhD Physics 2001\nSkills\nPython")
        assert scanner.state is ScanState.DONE
