"""
Text measurement and word wrapping with the PDF standard fonts.

Widths come from reportlab's built-in AFM metrics for the base-14 fonts, so
wrapping decisions match what the PDF serializer draws. Sizes are in points;
widths are returned in page units (millimetres by default).
"""

from typing import Callable, List

from reportlab.pdfbase import pdfmetrics

# (font_family, bold) -> PDF base-14 font name
STANDARD_FONTS = {
    ("helvetica", False): "Helvetica",
    ("helvetica", True): "Helvetica-Bold",
    ("times", False): "Times-Roman",
    ("times", True): "Times-Bold",
}

DEFAULT_FONT_FAMILY = "helvetica"


def resolve_font_name(font_family: str, bold: bool = False) -> str:
    """
    Map a theme font family to a PDF standard font name.

    Unknown families use Helvetica.

    Example:
        >>> resolve_font_name("times", bold=True)
        'Times-Bold'
    """
    key = ((font_family or DEFAULT_FONT_FAMILY).lower(), bool(bold))
    return STANDARD_FONTS.get(key, STANDARD_FONTS[(DEFAULT_FONT_FAMILY, bool(bold))])


def text_width(text: str, font_name: str, size: float, points_per_unit: float) -> float:
    """Width of text in page units when set in font_name at size points."""
    return pdfmetrics.stringWidth(text, font_name, size) / points_per_unit


def _split_long_word(word: str, max_width: float, width_of: Callable[[str], float]) -> List[str]:
    """Break a word that cannot fit on one line into character chunks."""
    chunks: List[str] = []
    current = ""
    for char in word:
        candidate = current + char
        if current and width_of(candidate) > max_width:
            chunks.append(current)
            current = char
        else:
            current = candidate
    if current:
        chunks.append(current)
    return chunks


def wrap_text(text: str, max_width: float, width_of: Callable[[str], float]) -> List[str]:
    """
    Greedy word wrap.

    Words are packed onto a line while the line fits in max_width. A single
    word wider than max_width is split by character (at least one character
    per line, so wrapping always terminates).

    Args:
        text: Text to wrap (runs of whitespace collapse to one space)
        max_width: Available width in page units
        width_of: Measures a string in page units

    Returns:
        Wrapped lines; empty list for blank text
    """
    lines: List[str] = []
    current = ""

    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if width_of(candidate) <= max_width:
            current = candidate
            continue

        if current:
            lines.append(current)
            current = ""

        if width_of(word) <= max_width:
            current = word
        else:
            chunks = _split_long_word(word, max_width, width_of)
            lines.extend(chunks[:-1])
            current = chunks[-1]

    if current:
        lines.append(current)

    return lines
