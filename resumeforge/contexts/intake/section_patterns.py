"""
Pattern matching for resume section header recognition.

A resume arrives as a flat stream of lines. These patterns decide which lines
open a new section and how their titles are cleaned.

Pattern classes follow the convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# KNOWN SECTION VOCABULARY
# =============================================================================


@dataclass(frozen=True)
class KnownSectionNames:
    """
    Section names matched as substrings of the upper-cased line.

    Longer names come first so that reporting code can pick the most
    specific match; header detection only needs any match.
    """

    NAMES: tuple = (
        "PROFESSIONAL EXPERIENCE",
        "PROFESSIONAL SUMMARY",
        "WORK EXPERIENCE",
        "TECHNICAL SKILLS",
        "CERTIFICATIONS",
        "ACHIEVEMENTS",
        "EXPERIENCE",
        "EDUCATION",
        "OBJECTIVE",
        "PROJECTS",
        "SUMMARY",
        "SKILLS",
    )


# =============================================================================
# FILLER / DECORATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class FillerPatterns:
    """Regex patterns for `-`/`=` decoration around or instead of titles."""

    # Line made only of dashes/equals (and spaces): "-----", "= = ="
    FILLER_ONLY: str = r"^[-=\s]+$"

    # Run of 3+ filler chars opening or closing a title: "--- SUMMARY ---", "=== Skills"
    FILLER_RUN: str = r"[-=]{3,}"

    # Any character that can belong to a title
    TITLE_CHAR: str = r"[^-=\s]"

    # Leading filler and whitespace; trailing filler, whitespace and a colon.
    # Both are matched at the start of the line or of the reversed line, so
    # long lines are scanned once.
    LEADING_DECORATION: str = r"[-=\s]+"
    TRAILING_DECORATION: str = r"[-=\s:]+"


# A list item: bullet marker, whitespace, then text ("• Experienced in ...").
# Such lines are body content even when they mention a section name.
BULLETED_LINE_PATTERN = r"^[•*-]\s+\S"

# Upper-case heuristic bounds (exclusive): short acronyms and long shouted
# sentences are not headings
MIN_UPPERCASE_HEADER_LENGTH = 3
MAX_UPPERCASE_HEADER_LENGTH = 50


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def contains_known_section_name(line: str) -> bool:
    """Check whether the upper-cased line contains a known section name."""
    upper_line = line.upper()
    return any(name in upper_line for name in KnownSectionNames.NAMES)


def is_filler_only(line: str) -> bool:
    """Check whether the line is pure `-`/`=` decoration."""
    return bool(re.match(FillerPatterns.FILLER_ONLY, line))


def is_bulleted_line(line: str) -> bool:
    """Check whether the line is a list item rather than pure decoration."""
    return bool(re.match(BULLETED_LINE_PATTERN, line)) and not is_filler_only(line)


def is_wrapped_title(line: str) -> bool:
    """Check for title text opened or closed by a run of 3+ `-`/`=` characters."""
    wrapped = re.match(FillerPatterns.FILLER_RUN, line) or re.match(
        FillerPatterns.FILLER_RUN, line[::-1]
    )
    return bool(wrapped) and bool(re.search(FillerPatterns.TITLE_CHAR, line))


def is_uppercase_heading(line: str) -> bool:
    """
    Check the "probably a heading, not a sentence" heuristic.

    Uses str.isupper(), which requires at least one cased character, so lines
    such as "555-123-4567" or "2019 - 2023" never count as headings.

    Args:
        line: Trimmed line

    Returns:
        True if the line is all upper case and its length lies strictly
        between MIN_UPPERCASE_HEADER_LENGTH and MAX_UPPERCASE_HEADER_LENGTH
    """
    return (
        line.isupper()
        and MIN_UPPERCASE_HEADER_LENGTH < len(line) < MAX_UPPERCASE_HEADER_LENGTH
    )


def is_section_header(line: str) -> bool:
    """
    Decide whether a trimmed line opens a new section.

    Args:
        line: Trimmed, non-empty line

    Returns:
        True if the line is not a list item and is a known section name,
        filler decoration, a filler-wrapped title, or an upper-case heading
    """
    if is_bulleted_line(line):
        return False
    return (
        contains_known_section_name(line)
        or is_filler_only(line)
        or is_wrapped_title(line)
        or is_uppercase_heading(line)
    )


def clean_section_title(line: str) -> str:
    """
    Strip `-`/`=` decoration and a trailing colon, then upper-case.

    Example:
        >>> clean_section_title("--- Professional Summary ---")
        'PROFESSIONAL SUMMARY'
        >>> clean_section_title("Skills:")
        'SKILLS'
        >>> clean_section_title("=====")
        ''
    """
    leading = re.match(FillerPatterns.LEADING_DECORATION, line)
    trailing = re.match(FillerPatterns.TRAILING_DECORATION, line[::-1])
    start = leading.end() if leading else 0
    end = len(line) - trailing.end() if trailing else len(line)
    return line[start:end].upper() if end > start else ""
