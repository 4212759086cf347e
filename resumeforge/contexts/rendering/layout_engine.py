"""
Layout engine: ParsedDocument + Theme -> PageLayout.

Places the header block (name, subtitle, contact lines) centered at the top of
the first page, then each section as a colored title with a short accent
underline followed by its content lines. Content lines are classified as
bullets, job-title-like lines or regular text, word-wrapped with the theme
font's metrics, and flowed across pages with fixed bottom reserves.

The engine is a pure function of its inputs: the same document, theme,
geometry and settings always produce an equal PageLayout.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from resumeforge.contexts.intake.document_data_structure import ParsedDocument, Section
from resumeforge.contexts.rendering.font_metrics import text_width, wrap_text
from resumeforge.contexts.rendering.logger import log_layout_result
from resumeforge.contexts.rendering.page_layout import (
    A4,
    Page,
    PageGeometry,
    PageLayout,
    PlacedRule,
    PlacedRun,
    RunStyle,
)
from resumeforge.contexts.rendering.themes import Theme

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class LayoutSettings:
    """
    Tunable spacing, sizes and colors. Distances are in page units, font
    sizes in points.
    """

    line_height: float = 6.0

    # Header block
    name_size: float = 24.0
    name_advance: float = 8.0
    header_rule_thickness: float = 0.5
    header_rule_advance: float = 8.0
    contact_size: float = 10.0
    contact_color: RGB = (80, 80, 80)
    subtitle_size: float = 14.0

    # Section titles
    section_title_size: float = 12.0
    section_title_advance: float = 8.0
    underline_length: float = 40.0
    underline_offset: float = 2.0
    underline_thickness: float = 0.3
    underline_advance: float = 2.0

    # Section content
    body_size: float = 10.0
    body_color: RGB = (60, 60, 60)
    bullet_marker: str = "•"
    bullet_marker_indent: float = 5.0
    bullet_text_indent: float = 10.0
    job_title_extra_advance: float = 1.0
    section_gap: float = 6.0

    # Distance from the page bottom below which nothing new starts
    section_break_reserve: float = 40.0
    line_break_reserve: float = 20.0


DEFAULT_LAYOUT_SETTINGS = LayoutSettings()

# =============================================================================
# LINE CLASSIFICATION
# =============================================================================

BULLET_PREFIX_PATTERN = r"^[•\-*]\s*"
YEAR_PATTERN = r"\d{4}"
CONTACT_MARKERS = ("@", "|")
JOB_TITLE_MARKERS = ("|", "Present")
MAX_JOB_TITLE_LENGTH = 100


class LineKind(Enum):
    BULLET = "bullet"
    JOB_TITLE = "job_title"
    REGULAR = "regular"


class HeaderKind(Enum):
    NAME = "name"
    CONTACT = "contact"
    SUBTITLE = "subtitle"


def classify_line(line: str) -> LineKind:
    """
    Classify a section content line.

    Example:
        >>> classify_line("- Led a team of 5").value
        'bullet'
        >>> classify_line("Senior Engineer | Acme | 2020 - Present").value
        'job_title'
    """
    if re.match(BULLET_PREFIX_PATTERN, line):
        return LineKind.BULLET
    if (
        any(marker in line for marker in JOB_TITLE_MARKERS)
        or re.search(YEAR_PATTERN, line)
        or len(line) < MAX_JOB_TITLE_LENGTH
    ):
        return LineKind.JOB_TITLE
    return LineKind.REGULAR


def classify_header_line(line: str, is_first: bool) -> HeaderKind:
    """The first header line is the name; lines with @ or | are contact details."""
    if is_first:
        return HeaderKind.NAME
    if any(marker in line for marker in CONTACT_MARKERS):
        return HeaderKind.CONTACT
    return HeaderKind.SUBTITLE


def strip_bullet(line: str) -> str:
    return re.sub(BULLET_PREFIX_PATTERN, "", line, count=1)


# =============================================================================
# PAGE BUILDER
# =============================================================================


class _PageBuilder:
    """Accumulates runs and rules for the current page and tracks the cursor."""

    def __init__(self, geometry: PageGeometry, settings: LayoutSettings):
        self.geometry = geometry
        self.settings = settings
        self.y = geometry.margin
        self.line_limit = geometry.height - max(settings.line_break_reserve, geometry.margin)
        self.section_limit = geometry.height - max(
            settings.section_break_reserve, geometry.margin
        )
        self._pages: List[Page] = []
        self._runs: List[PlacedRun] = []
        self._rules: List[PlacedRule] = []

    def measure(self, text: str, style: RunStyle) -> float:
        return text_width(text, style.font_name, style.size, self.geometry.points_per_unit)

    def wrap(self, text: str, style: RunStyle, max_width: float) -> List[str]:
        return wrap_text(text, max_width, lambda candidate: self.measure(candidate, style))

    def new_page(self) -> None:
        self._pages.append(
            Page(number=len(self._pages) + 1, runs=tuple(self._runs), rules=tuple(self._rules))
        )
        self._runs = []
        self._rules = []
        self.y = self.geometry.margin

    def ensure_room(self, limit: float) -> None:
        """Start a new page if the cursor is past limit (never leaves a blank page)."""
        if self.y > limit and (self._runs or self._rules):
            self.new_page()

    def place_run(self, text: str, style: RunStyle, x: float) -> None:
        self._runs.append(PlacedRun(text=text, style=style, x=x, y=self.y))

    def place_rule(self, x1: float, x2: float, y: float, color: RGB, thickness: float) -> None:
        self._rules.append(
            PlacedRule(x1=x1, y1=y, x2=x2, y2=y, color=color, thickness=thickness)
        )

    def finish(self) -> PageLayout:
        if self._runs or self._rules or not self._pages:
            self.new_page()
        return PageLayout(geometry=self.geometry, pages=tuple(self._pages))


# =============================================================================
# PLACEMENT
# =============================================================================


def _place_header_line(builder: _PageBuilder, line: str, kind: HeaderKind, theme: Theme) -> None:
    settings = builder.settings
    geometry = builder.geometry

    if kind is HeaderKind.NAME:
        style = RunStyle(True, theme.primary_color, settings.name_size, theme.font_family)
        advance = settings.name_advance
    elif kind is HeaderKind.CONTACT:
        style = RunStyle(False, settings.contact_color, settings.contact_size, theme.font_family)
        advance = settings.line_height
    else:
        style = RunStyle(False, theme.accent_color, settings.subtitle_size, theme.font_family)
        advance = settings.line_height

    for piece in builder.wrap(line, style, geometry.content_width):
        builder.ensure_room(builder.line_limit)
        x = (geometry.width - builder.measure(piece, style)) / 2
        builder.place_run(piece, style, x)
        builder.y += advance

    if kind is HeaderKind.NAME:
        builder.place_rule(
            geometry.margin,
            geometry.width - geometry.margin,
            builder.y,
            theme.accent_color,
            settings.header_rule_thickness,
        )
        builder.y += settings.header_rule_advance


def _place_wrapped(
    builder: _PageBuilder, text: str, style: RunStyle, x: float, max_width: float, advance: float
) -> None:
    for piece in builder.wrap(text, style, max_width):
        builder.ensure_room(builder.line_limit)
        builder.place_run(piece, style, x)
        builder.y += advance


def _place_bullet(builder: _PageBuilder, line: str, style: RunStyle) -> None:
    settings = builder.settings
    margin = builder.geometry.margin
    max_width = builder.geometry.content_width - settings.bullet_text_indent

    # A bare marker ("*") still gets its own line with the marker and no text
    pieces = builder.wrap(strip_bullet(line), style, max_width) or [""]
    for index, piece in enumerate(pieces):
        builder.ensure_room(builder.line_limit)
        if index == 0:
            builder.place_run(settings.bullet_marker, style, margin + settings.bullet_marker_indent)
        if piece:
            builder.place_run(piece, style, margin + settings.bullet_text_indent)
        builder.y += settings.line_height


def _place_section(builder: _PageBuilder, section: Section, theme: Theme) -> None:
    settings = builder.settings
    geometry = builder.geometry
    margin = geometry.margin

    builder.ensure_room(builder.section_limit)

    title_style = RunStyle(
        True, theme.primary_color, settings.section_title_size, theme.font_family
    )
    for index, piece in enumerate(builder.wrap(section.title, title_style, geometry.content_width)):
        if index > 0:
            builder.ensure_room(builder.line_limit)
        builder.place_run(piece, title_style, margin)
        builder.y += settings.section_title_advance

    builder.place_rule(
        margin,
        margin + settings.underline_length,
        builder.y - settings.underline_offset,
        theme.accent_color,
        settings.underline_thickness,
    )
    builder.y += settings.underline_advance

    body_style = RunStyle(False, settings.body_color, settings.body_size, theme.font_family)
    job_title_style = RunStyle(True, theme.primary_color, settings.body_size, theme.font_family)

    for line in section.lines:
        kind = classify_line(line)
        if kind is LineKind.BULLET:
            _place_bullet(builder, line, body_style)
        elif kind is LineKind.JOB_TITLE:
            _place_wrapped(
                builder,
                line,
                job_title_style,
                margin,
                geometry.content_width,
                settings.line_height + settings.job_title_extra_advance,
            )
        else:
            _place_wrapped(
                builder, line, body_style, margin, geometry.content_width, settings.line_height
            )

    builder.y += settings.section_gap


def layout_document(
    document: ParsedDocument,
    theme: Theme,
    geometry: PageGeometry = A4,
    settings: LayoutSettings = DEFAULT_LAYOUT_SETTINGS,
) -> PageLayout:
    """
    Lay out a parsed resume across pages.

    Args:
        document: Parsed resume
        theme: Colors and font family
        geometry: Page size and margin (A4 millimetres by default)
        settings: Spacing, sizes and body colors

    Returns:
        PageLayout with at least one page

    Example:
        >>> from resumeforge.contexts.intake import parse_document
        >>> from resumeforge.contexts.rendering.themes import get_theme
        >>> layout = layout_document(parse_document("Jane Doe"), get_theme("modern-blue"))
        >>> layout.pages[0].runs[0].y
        20.0
    """
    builder = _PageBuilder(geometry, settings)

    for index, line in enumerate(document.header_lines):
        _place_header_line(builder, line, classify_header_line(line, index == 0), theme)

    for section in document.sections:
        _place_section(builder, section, theme)

    layout = builder.finish()
    log_layout_result(layout, theme.id)
    return layout
