"""
Public entry points.

Thin orchestration over the contexts: parse text, score it, lay it out, render
it, and route analysis and improvement AI-first with local fallbacks.

Example:
    >>> from resumeforge import pipeline
    >>> report = pipeline.score(resume_text, job_description)
    >>> pdf_bytes = pipeline.render(resume_text, "classic-serif", "pdf")
"""

from typing import Optional, Union

from resumeforge.contexts.intake.document_data_structure import ParsedDocument
from resumeforge.contexts.intake.document_parser import parse_document
from resumeforge.contexts.rendering.layout_engine import (
    DEFAULT_LAYOUT_SETTINGS,
    LayoutSettings,
    layout_document,
)
from resumeforge.contexts.rendering.page_layout import A4, PageGeometry, PageLayout
from resumeforge.contexts.rendering.serializers import get_serializer
from resumeforge.contexts.rendering.themes import DEFAULT_THEME_ID, Theme
from resumeforge.contexts.rendering.themes import get_theme as _catalog_get_theme
from resumeforge.contexts.scoring.analyzers import (
    FallbackAnalyzer,
    LLMAnalyzer,
    ResumeAnalyzer,
    run_analysis,
)
from resumeforge.contexts.scoring.heuristic_scorer import composite_report
from resumeforge.contexts.scoring.improver import FallbackImprover, LLMImprover, ResumeImprover
from resumeforge.contexts.scoring.score_report import ScoreReport
from resumeforge.contexts.templating.resume_builder import ResumeFormData, build_resume_text


def parse(text: str) -> ParsedDocument:
    """Split resume text into header lines and titled sections. Never raises."""
    return parse_document(text)


def score(resume_text: str, job_description_text: str) -> ScoreReport:
    """Local heuristic ScoreReport. Never raises and never touches the network."""
    return composite_report(resume_text, job_description_text)


def get_theme(theme_id: str) -> Theme:
    """Theme by id; unknown ids fall back to the default theme with a warning."""
    return _catalog_get_theme(theme_id)


def layout(
    document: ParsedDocument,
    theme: Union[Theme, str] = DEFAULT_THEME_ID,
    geometry: PageGeometry = A4,
    settings: LayoutSettings = DEFAULT_LAYOUT_SETTINGS,
) -> PageLayout:
    """Lay out a parsed resume; theme may be a Theme or a theme id."""
    if not isinstance(theme, Theme):
        theme = get_theme(theme)
    return layout_document(document, theme, geometry, settings)


def analyze(
    resume_text: str,
    job_description_text: str,
    analyzer: Optional[ResumeAnalyzer] = None,
) -> ScoreReport:
    """
    Analyze a resume, AI-first.

    The given analyzer (default: an LLMAnalyzer for the configured provider)
    is tried first; on AnalysisServiceError the heuristic report is returned
    instead and a warning is logged.
    """
    primary = analyzer if analyzer is not None else LLMAnalyzer()
    return run_analysis(FallbackAnalyzer(primary), resume_text, job_description_text)


def improve(
    resume_text: str,
    job_description_text: str,
    report: Optional[ScoreReport] = None,
    improver: Optional[ResumeImprover] = None,
) -> str:
    """
    Rewrite a resume, AI-first with rule-based fallback.

    Args:
        resume_text: Resume to improve
        job_description_text: Target job description
        report: Findings to act on (defaults to the heuristic report)
        improver: Primary improver (default: an LLMImprover for the configured provider)
    """
    if report is None:
        report = score(resume_text, job_description_text)
    primary = improver if improver is not None else LLMImprover()
    return FallbackImprover(primary).improve(resume_text or "", job_description_text or "", report)


def render(
    text: str,
    theme_id: str = DEFAULT_THEME_ID,
    fmt: str = "pdf",
    geometry: PageGeometry = A4,
    settings: LayoutSettings = DEFAULT_LAYOUT_SETTINGS,
) -> bytes:
    """
    Parse, lay out and serialize resume text.

    Raises:
        UnsupportedFormatError: fmt is not pdf, docx or txt
        SerializationError: The document writer failed
    """
    serializer = get_serializer(fmt, settings)
    return serializer.render(parse(text), get_theme(theme_id), geometry)


def build(form: ResumeFormData) -> str:
    """Assemble resume text from form data with the bundled template."""
    return build_resume_text(form)
