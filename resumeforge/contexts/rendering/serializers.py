"""
Document serializers: write a parsed resume as PDF, DOCX or plain text bytes.

PDF output draws a PageLayout onto a reportlab canvas, so page breaks and
wrapping are exactly the layout engine's. DOCX output maps the parsed
structure onto Word paragraphs (headings, bullets, bold job titles) and lets
Word flow the text. Plain text is the normalized resume text.
"""

import io
import re
import time
from abc import ABC, abstractmethod
from typing import Dict, Type

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Mm, Pt, RGBColor
from reportlab.pdfgen import canvas

from resumeforge.contexts.intake.document_data_structure import ParsedDocument
from resumeforge.contexts.rendering.exceptions import SerializationError, UnsupportedFormatError
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
from resumeforge.contexts.rendering.logger import _log_debug, log_serialization_result
from resumeforge.contexts.rendering.page_layout import A4, PageGeometry, PageLayout
from resumeforge.contexts.rendering.themes import Theme


def _unit_rgb(color) -> tuple:
    """0-255 RGB -> 0-1 floats for reportlab."""
    return tuple(component / 255 for component in color)


class DocumentSerializer(ABC):
    """Writes a parsed resume to bytes in one output format."""

    fmt: str
    media_type: str

    def __init__(self, settings: LayoutSettings = DEFAULT_LAYOUT_SETTINGS):
        self.settings = settings

    @abstractmethod
    def _write(self, document: ParsedDocument, theme: Theme, geometry: PageGeometry) -> bytes:
        pass

    def render(
        self, document: ParsedDocument, theme: Theme, geometry: PageGeometry = A4
    ) -> bytes:
        """
        Serialize document with theme.

        Raises:
            SerializationError: The underlying writer failed
        """
        start_time = time.time()
        try:
            data = self._write(document, theme, geometry)
        except SerializationError:
            raise
        except Exception as e:
            raise SerializationError(f"Failed to write {self.fmt}", self.fmt, e) from e
        log_serialization_result(self.fmt, len(data), time.time() - start_time)
        return data


class PDFSerializer(DocumentSerializer):
    """PDF via reportlab, drawing the layout engine's placed runs and rules."""

    fmt = "pdf"
    media_type = "application/pdf"

    def _write(self, document: ParsedDocument, theme: Theme, geometry: PageGeometry) -> bytes:
        layout = layout_document(document, theme, geometry, self.settings)
        title = document.header_lines[0] if document.header_lines else "Resume"
        return self.render_layout(layout, title=title)

    def render_layout(self, layout: PageLayout, title: str = "Resume") -> bytes:
        """
        Draw a PageLayout; one canvas page per layout page.

        Layout coordinates are top-left based page units; reportlab's are
        bottom-left based points, so y is flipped.
        """
        geometry = layout.geometry
        scale = geometry.points_per_unit
        page_height = geometry.height_points

        buffer = io.BytesIO()
        # invariant=1 omits timestamps and random ids so output is reproducible
        pdf = canvas.Canvas(
            buffer, pagesize=(geometry.width_points, page_height), invariant=1
        )
        pdf.setTitle(title)
        pdf.setCreator("resumeforge")

        for page in layout.pages:
            for rule in page.rules:
                pdf.setStrokeColorRGB(*_unit_rgb(rule.color))
                pdf.setLineWidth(rule.thickness * scale)
                pdf.line(
                    rule.x1 * scale,
                    page_height - rule.y1 * scale,
                    rule.x2 * scale,
                    page_height - rule.y2 * scale,
                )
            for run in page.runs:
                pdf.setFillColorRGB(*_unit_rgb(run.style.color))
                pdf.setFont(run.style.font_name, run.style.size)
                pdf.drawString(run.x * scale, page_height - run.y * scale, run.text)
            pdf.showPage()

        pdf.save()
        _log_debug(f"Drew {layout.page_count} PDF page(s)")
        return buffer.getvalue()


# Word equivalents of the PDF standard font families
DOCX_FONT_NAMES = {
    "helvetica": "Arial",
    "times": "Times New Roman",
}

# Control characters that XML 1.0 (and so WordprocessingML) cannot hold
XML_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def _xml_safe(text: str) -> str:
    return XML_INVALID_CHARS.sub("", text)


class DocxSerializer(DocumentSerializer):
    """Word document via python-docx."""

    fmt = "docx"
    media_type = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    def _write(self, document: ParsedDocument, theme: Theme, geometry: PageGeometry) -> bytes:
        settings = self.settings
        doc = Document()

        page_setup = doc.sections[0]
        page_setup.page_width = Mm(geometry.width)
        page_setup.page_height = Mm(geometry.height)
        for side in ("left_margin", "right_margin", "top_margin", "bottom_margin"):
            setattr(page_setup, side, Mm(geometry.margin))

        font_name = DOCX_FONT_NAMES.get(theme.font_family, DOCX_FONT_NAMES["helvetica"])
        normal = doc.styles["Normal"]
        normal.font.name = font_name
        normal.font.size = Pt(settings.body_size)

        if document.header_lines:
            doc.core_properties.title = _xml_safe(document.header_lines[0])

        for index, line in enumerate(document.header_lines):
            kind = classify_header_line(line, index == 0)
            paragraph = doc.add_paragraph()
            paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
            run = paragraph.add_run(_xml_safe(line))
            if kind is HeaderKind.NAME:
                run.bold = True
                run.font.size = Pt(settings.name_size)
                run.font.color.rgb = RGBColor(*theme.primary_color)
            elif kind is HeaderKind.CONTACT:
                run.font.size = Pt(settings.contact_size)
                run.font.color.rgb = RGBColor(*settings.contact_color)
            else:
                run.font.size = Pt(settings.subtitle_size)
                run.font.color.rgb = RGBColor(*theme.accent_color)

        for section in document.sections:
            heading = doc.add_heading(level=1)
            title_run = heading.add_run(_xml_safe(section.title))
            title_run.font.name = font_name
            title_run.font.size = Pt(settings.section_title_size)
            title_run.font.color.rgb = RGBColor(*theme.primary_color)

            for line in section.lines:
                kind = classify_line(line)
                line = _xml_safe(line)
                if kind is LineKind.BULLET:
                    doc.add_paragraph(strip_bullet(line), style="List Bullet")
                elif kind is LineKind.JOB_TITLE:
                    run = doc.add_paragraph().add_run(line)
                    run.bold = True
                    run.font.color.rgb = RGBColor(*theme.primary_color)
                else:
                    run = doc.add_paragraph().add_run(line)
                    run.font.color.rgb = RGBColor(*settings.body_color)

        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()


class PlainTextSerializer(DocumentSerializer):
    """UTF-8 text of the normalized document; the theme has no effect."""

    fmt = "txt"
    media_type = "text/plain"

    def _write(self, document: ParsedDocument, theme: Theme, geometry: PageGeometry) -> bytes:
        return (document.to_text() + "\n").encode("utf-8")


SERIALIZERS: Dict[str, Type[DocumentSerializer]] = {
    PDFSerializer.fmt: PDFSerializer,
    DocxSerializer.fmt: DocxSerializer,
    PlainTextSerializer.fmt: PlainTextSerializer,
}

SUPPORTED_FORMATS = tuple(SERIALIZERS)


def get_serializer(
    fmt: str, settings: LayoutSettings = DEFAULT_LAYOUT_SETTINGS
) -> DocumentSerializer:
    """
    Serializer for an output format ("pdf", "docx" or "txt"; case and a
    leading dot are ignored).

    Raises:
        UnsupportedFormatError: No serializer for fmt
    """
    key = (fmt or "").strip().lower().lstrip(".")
    serializer_class = SERIALIZERS.get(key)
    if serializer_class is None:
        raise UnsupportedFormatError(fmt, SUPPORTED_FORMATS)
    return serializer_class(settings)
