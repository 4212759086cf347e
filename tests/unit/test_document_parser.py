"""Unit tests for resume text parsing into header lines and sections."""

import pytest

from resumeforge.contexts.intake.document_parser import parse_document, split_lines


@pytest.mark.unit
class TestSplitLines:
    def test_trims_and_drops_blank_lines(self):
        assert split_lines("  Jane Doe  \n\n\t\nEXPERIENCE\n") == ["Jane Doe", "EXPERIENCE"]

    def test_handles_windows_line_endings(self):
        assert split_lines("a\r\nb\r\n") == ["a", "b"]


@pytest.mark.unit
class TestParseDocument:
    def test_two_sections_in_order(self):
        """Each header collects exactly the lines that follow it."""
        text = "EXPERIENCE\nEngineer at Acme\nBuilt billing APIs\nEDUCATION\nBS Physics\nState U"
        doc = parse_document(text)

        assert len(doc.sections) == 2
        assert doc.section_titles == ("EXPERIENCE", "EDUCATION")
        assert doc.sections[0].lines == ("Engineer at Acme", "Built billing APIs")
        assert doc.sections[1].lines == ("BS Physics", "State U")
        assert doc.header_lines == ()

    def test_lines_before_first_header_are_header_lines(self, sample_resume):
        doc = parse_document(sample_resume)

        assert doc.header_lines == (
            "Jane Doe",
            "Senior Software Engineer",
            "jane.doe@example.com | 555-123-4567 | Austin, TX",
        )
        assert doc.section_titles == (
            "PROFESSIONAL SUMMARY",
            "TECHNICAL SKILLS",
            "PROFESSIONAL EXPERIENCE",
            "EDUCATION",
        )

    def test_no_headers_puts_everything_in_header(self):
        doc = parse_document("Jane Doe\njane@example.com")
        assert doc.header_lines == ("Jane Doe", "jane@example.com")
        assert not doc.has_sections

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\n", "-----", "=====\n-----"])
    def test_degenerate_input_yields_empty_document(self, text):
        doc = parse_document(text)
        assert doc.is_empty

    def test_none_is_treated_as_empty(self):
        assert parse_document(None).is_empty

    def test_filler_line_does_not_open_a_section(self):
        doc = parse_document("Jane Doe\n-----\nSKILLS\nPython")
        assert doc.header_lines == ("Jane Doe",)
        assert doc.section_titles == ("SKILLS",)

    def test_decorated_titles_are_cleaned(self):
        doc = parse_document("=== Work Experience ===\nAcme\nSkills:\nPython")
        assert doc.section_titles == ("WORK EXPERIENCE", "SKILLS")

    def test_uppercase_line_opens_a_section(self):
        doc = parse_document("Jane Doe\nVOLUNTEERING\nFood bank")
        assert doc.section_titles == ("VOLUNTEERING",)
        assert doc.sections[0].lines == ("Food bank",)

    def test_bulleted_line_naming_a_section_is_content(self):
        doc = parse_document("SUMMARY\n• Experienced in skills mentoring\nEDUCATION\nBS Physics")

        assert doc.section_titles == ("SUMMARY", "EDUCATION")
        assert doc.sections[0].lines == ("• Experienced in skills mentoring",)

    def test_empty_section_is_kept(self):
        doc = parse_document("SKILLS\nEDUCATION\nBS Physics")
        assert doc.sections[0].title == "SKILLS"
        assert doc.sections[0].lines == ()

    def test_idempotent_through_to_text(self, sample_resume):
        doc = parse_document(sample_resume)
        assert parse_document(doc.to_text()) == doc

    @pytest.mark.parametrize(
        "text",
        ["\x00\x01", "•••", "A" * 5000, "SKILLS:" * 100, "|\n@\n#\n", "éè résumé"],
    )
    def test_never_raises(self, text):
        parse_document(text)


@pytest.mark.unit
class TestParsedDocument:
    def test_get_section_is_case_insensitive_substring(self, sample_resume):
        doc = parse_document(sample_resume)
        assert doc.get_section("experience").title == "PROFESSIONAL EXPERIENCE"
        assert doc.get_section("Skills").lines == ("Python, Django, PostgreSQL, Docker, AWS",)
        assert doc.get_section("projects") is None

    def test_section_text_joins_lines(self):
        doc = parse_document("SKILLS\nPython\nSQL")
        assert doc.sections[0].text == "Python\nSQL"
