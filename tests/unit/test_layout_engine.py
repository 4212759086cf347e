"""Unit tests for the layout engine: placement, wrapping and pagination."""

import pytest

from resumeforge.contexts.intake.document_data_structure import ParsedDocument, Section
from resumeforge.contexts.intake.document_parser import parse_document
from resumeforge.contexts.rendering.font_metrics import text_width
from resumeforge.contexts.rendering.layout_engine import (
    DEFAULT_LAYOUT_SETTINGS,
    HeaderKind,
    LayoutSettings,
    LineKind,
    classify_header_line,
    classify_line,
    layout_document,
    strip_bullet,
)
from resumeforge.contexts.rendering.page_layout import A4, US_LETTER, PageGeometry
from resumeforge.contexts.rendering.themes import get_theme


@pytest.fixture
def theme():
    return get_theme("modern-blue")


def bullet_section(title, count):
    return Section(title=title, lines=tuple(f"- Item {index}" for index in range(count)))


def assert_within_page(layout):
    bottom = layout.geometry.height - layout.geometry.margin
    for _, run in layout.iter_runs():
        assert layout.geometry.margin <= run.y <= bottom


@pytest.mark.unit
class TestClassifyLine:
    @pytest.mark.parametrize("line", ["• Led a team", "- Built APIs", "* Shipped", "-Tight"])
    def test_bullets(self, line):
        assert classify_line(line) is LineKind.BULLET

    @pytest.mark.parametrize(
        "line",
        ["Senior Engineer | Acme", "2019 - Present", "Engineer at Acme since 2019", "Short line"],
    )
    def test_job_title_like(self, line):
        assert classify_line(line) is LineKind.JOB_TITLE

    def test_long_prose_is_regular(self):
        line = "Designed and maintained services used across the company " * 3
        assert classify_line(line.strip()) is LineKind.REGULAR

    def test_strip_bullet(self):
        assert strip_bullet("•  Led a team") == "Led a team"
        assert strip_bullet("Led - a team") == "Led - a team"


@pytest.mark.unit
@pytest.mark.parametrize(
    "line, is_first, kind",
    [
        ("Jane Doe", True, HeaderKind.NAME),
        ("jane@example.com", False, HeaderKind.CONTACT),
        ("Austin | Remote", False, HeaderKind.CONTACT),
        ("Senior Software Engineer", False, HeaderKind.SUBTITLE),
    ],
)
def test_classify_header_line(line, is_first, kind):
    assert classify_header_line(line, is_first) is kind


@pytest.mark.unit
class TestHeaderPlacement:
    def test_name_is_centered_with_full_width_rule(self, theme):
        layout = layout_document(parse_document("Jane Doe\njane@example.com"), theme)
        page = layout.pages[0]
        name, contact = page.runs

        assert name.y == A4.margin
        assert name.style.bold
        assert name.style.color == theme.primary_color
        width = text_width("Jane Doe", name.style.font_name, name.style.size, A4.points_per_unit)
        assert name.x == pytest.approx((A4.width - width) / 2)

        rule = page.rules[0]
        assert (rule.x1, rule.x2) == (A4.margin, A4.width - A4.margin)
        assert rule.y1 == name.y + DEFAULT_LAYOUT_SETTINGS.name_advance
        assert rule.color == theme.accent_color

        assert contact.y == rule.y1 + DEFAULT_LAYOUT_SETTINGS.header_rule_advance
        assert contact.style.color == DEFAULT_LAYOUT_SETTINGS.contact_color

    def test_subtitle_uses_accent_color(self, theme):
        layout = layout_document(parse_document("Jane Doe\nBackend Engineer"), theme)
        subtitle = layout.pages[0].runs[1]
        assert subtitle.style.color == theme.accent_color
        assert subtitle.style.size == DEFAULT_LAYOUT_SETTINGS.subtitle_size


@pytest.mark.unit
class TestSectionPlacement:
    def test_title_underline_and_lines(self, theme):
        doc = ParsedDocument(sections=(Section("SKILLS", ("Python, SQL", "- Docker")),))
        page = layout_document(doc, theme).pages[0]
        title, job_line, marker, bullet_text = page.runs
        settings = DEFAULT_LAYOUT_SETTINGS

        assert (title.text, title.x, title.y) == ("SKILLS", A4.margin, A4.margin)
        assert title.style.color == theme.primary_color

        underline = page.rules[0]
        assert underline.x2 - underline.x1 == settings.underline_length
        assert underline.y1 == title.y + settings.section_title_advance - settings.underline_offset

        first_line_y = title.y + settings.section_title_advance + settings.underline_advance
        assert job_line.y == first_line_y
        assert job_line.style.bold

        assert marker.text == settings.bullet_marker
        assert marker.x == A4.margin + settings.bullet_marker_indent
        assert bullet_text.text == "Docker"
        assert bullet_text.x == A4.margin + settings.bullet_text_indent
        assert marker.y == bullet_text.y
        assert bullet_text.y == job_line.y + settings.line_height + settings.job_title_extra_advance

    def test_bare_marker_still_places_marker(self, theme):
        layout = layout_document(parse_document("SKILLS\n*\n- Docker"), theme)
        title, bare_marker, marker, bullet_text = layout.pages[0].runs
        settings = DEFAULT_LAYOUT_SETTINGS

        assert bare_marker.text == settings.bullet_marker
        assert bare_marker.x == A4.margin + settings.bullet_marker_indent
        assert marker.y == bare_marker.y + settings.line_height
        assert bullet_text.text == "Docker"

    def test_long_lines_wrap_within_content_width(self, theme):
        line = "Maintained internal tooling for deployment and monitoring across teams " * 4
        doc = ParsedDocument(sections=(Section("SUMMARY", (line.strip(),)),))
        layout = layout_document(doc, theme)
        body_runs = layout.pages[0].runs[1:]

        assert len(body_runs) > 1
        for run in body_runs:
            width = text_width(run.text, run.style.font_name, run.style.size, A4.points_per_unit)
            assert run.x + width <= A4.margin + A4.content_width + 1e-9
        assert " ".join(run.text for run in body_runs) == " ".join(line.split())


@pytest.mark.unit
class TestPagination:
    def test_overflowing_line_starts_next_page_at_top_margin(self, theme):
        doc = ParsedDocument(sections=(bullet_section("EXPERIENCE", 50),))
        layout = layout_document(doc, theme)

        assert layout.page_count == 2
        second_page = layout.pages[1]
        assert second_page.runs[0].y == 20
        assert second_page.runs[0].text == "•"
        assert second_page.runs[1].text == "Item 42"
        page_one_texts = [run.text for run in layout.pages[0].runs]
        assert "Item 41" in page_one_texts
        assert "Item 42" not in page_one_texts
        assert_within_page(layout)

    def test_section_starting_near_bottom_moves_to_next_page(self, theme):
        doc = ParsedDocument(
            sections=(bullet_section("EXPERIENCE", 38), Section("EDUCATION", ("BS Physics",)))
        )
        layout = layout_document(doc, theme)

        assert layout.page_count == 2
        title = layout.pages[1].runs[0]
        assert (title.text, title.y) == ("EDUCATION", A4.margin)

    def test_section_with_room_stays_on_page(self, theme):
        doc = ParsedDocument(
            sections=(bullet_section("EXPERIENCE", 36), Section("EDUCATION", ("BS Physics",)))
        )
        assert layout_document(doc, theme).page_count == 1

    def test_no_text_is_lost(self, theme):
        doc = ParsedDocument(sections=(bullet_section("EXPERIENCE", 200),))
        layout = layout_document(doc, theme)
        texts = [run.text for _, run in layout.iter_runs() if run.text != "•"]

        assert texts == ["EXPERIENCE"] + [f"Item {index}" for index in range(200)]
        assert [page.number for page in layout.pages] == list(range(1, layout.page_count + 1))
        assert not any(page.is_blank for page in layout.pages)
        assert_within_page(layout)

    def test_letter_geometry(self, theme):
        doc = ParsedDocument(sections=(bullet_section("EXPERIENCE", 200),))
        assert_within_page(layout_document(doc, theme, US_LETTER))

    def test_margin_larger_than_reserve(self, theme):
        geometry = PageGeometry(margin=30.0)
        settings = LayoutSettings(line_break_reserve=5.0)
        doc = ParsedDocument(sections=(bullet_section("EXPERIENCE", 100),))
        assert_within_page(layout_document(doc, theme, geometry, settings))


@pytest.mark.unit
class TestLayoutProperties:
    def test_empty_document_has_one_blank_page(self, theme):
        layout = layout_document(parse_document(""), theme)
        assert layout.page_count == 1
        assert layout.pages[0].is_blank

    def test_idempotent(self, theme, sample_resume):
        doc = parse_document(sample_resume)
        first = layout_document(doc, theme)
        second = layout_document(doc, theme)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_theme_font_family_flows_to_runs(self, sample_resume):
        layout = layout_document(parse_document(sample_resume), get_theme("classic-serif"))
        assert {run.style.font_name for _, run in layout.iter_runs()} <= {
            "Times-Roman",
            "Times-Bold",
        }
