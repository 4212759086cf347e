"""Unit tests for section header recognition."""

import pytest

from resumeforge.contexts.intake.section_patterns import (
    clean_section_title,
    contains_known_section_name,
    is_bulleted_line,
    is_filler_only,
    is_section_header,
    is_uppercase_heading,
    is_wrapped_title,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "line",
    [
        "EXPERIENCE",
        "Professional Experience",
        "Technical Skills:",
        "--- Summary ---",
        "=== Anything Goes",
        "Projects ====",
        "-----",
        "AWARDS",
        "Relevant experience",
    ],
)
def test_section_headers(line):
    assert is_section_header(line)


@pytest.mark.unit
@pytest.mark.parametrize(
    "line",
    [
        "Jane Doe",
        "555-123-4567",
        "2019 - 2023",
        "Senior Engineer | Acme",
        "AWS",
        "THIS LINE IS A VERY LONG SHOUTED SENTENCE THAT GOES ON AND ON",
        "- Built APIs",
        "• Experienced in Python services",
        "* Built a skills tracker",
        "- PROJECT LEAD",
    ],
)
def test_not_section_headers(line):
    assert not is_section_header(line)


@pytest.mark.unit
def test_known_names_match_as_substrings():
    assert contains_known_section_name("my work experience so far")
    assert not contains_known_section_name("Volunteering")


@pytest.mark.unit
def test_filler_only():
    assert is_filler_only("- - - = = =")
    assert not is_filler_only("--- Skills ---")


@pytest.mark.unit
def test_bulleted_lines():
    assert is_bulleted_line("• Experienced")
    assert is_bulleted_line("-   Led the team")
    assert not is_bulleted_line("- - -")
    assert not is_bulleted_line("--- Skills ---")
    assert not is_bulleted_line("*")


@pytest.mark.unit
def test_uppercase_heading_length_bounds():
    # Bounds are exclusive: 3 characters is too short, 4 is enough
    assert not is_uppercase_heading("ABC")
    assert is_uppercase_heading("ABCD")
    assert not is_uppercase_heading("A" * 50)
    assert is_uppercase_heading("A" * 49)


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, cleaned",
    [
        ("--- Professional Summary ---", "PROFESSIONAL SUMMARY"),
        ("Skills:", "SKILLS"),
        ("==Education==", "EDUCATION"),
        ("  Projects :  ", "PROJECTS"),
        ("=====", ""),
        ("::", ""),
        ("Work - Experience", "WORK - EXPERIENCE"),
    ],
)
def test_clean_section_title(raw, cleaned):
    assert clean_section_title(raw) == cleaned


@pytest.mark.unit
def test_wrapped_title():
    assert is_wrapped_title("--- Summary ---")
    assert is_wrapped_title("Awards ===")
    assert not is_wrapped_title("-- Awards --")
    assert not is_wrapped_title("-----")
    assert not is_wrapped_title("Built CI/CD --- fast")
