"""
Rendering Context

Responsibilities:
- Loads the theme table (colors, font family) from YAML
- Lays out a parsed resume across fixed-size pages with theme styling
- Serializes resumes to PDF, DOCX and plain text

Owns: Themes, page geometry, pagination rules, document writers
Never: Changes resume content or scores it
"""

from resumeforge.contexts.rendering.layout_engine import LayoutSettings, layout_document
from resumeforge.contexts.rendering.page_layout import PageGeometry, PageLayout
from resumeforge.contexts.rendering.serializers import get_serializer
from resumeforge.contexts.rendering.themes import Theme, ThemeCatalog, get_theme

__all__ = [
    "LayoutSettings",
    "PageGeometry",
    "PageLayout",
    "Theme",
    "ThemeCatalog",
    "get_serializer",
    "get_theme",
    "layout_document",
]
