"""
Resume analyzers.

Two interchangeable ways to produce a ScoreReport: the local heuristic scorer
and an LLM provider. FallbackAnalyzer composes them: the primary analyzer is
tried first and any AnalysisServiceError drops through to the heuristic one.
"""

import time
from abc import ABC, abstractmethod
from typing import Optional

from resumeforge.contexts.scoring.exceptions import AnalysisServiceError
from resumeforge.contexts.scoring.heuristic_scorer import composite_report
from resumeforge.contexts.scoring.keyword_catalog import DEFAULT_CATALOG, KeywordCatalog
from resumeforge.contexts.scoring.logger import (
    _log_debug,
    log_analysis_result,
    log_analysis_start,
    log_fallback,
)
from resumeforge.contexts.scoring.prompts import ANALYSIS_SYSTEM_PROMPT, build_analysis_prompt
from resumeforge.contexts.scoring.score_report import ScoreReport
from resumeforge.utils.llm import LLMProvider, get_provider, parse_object_response


class ResumeAnalyzer(ABC):
    """Produces a ScoreReport for a resume against a job description."""

    name: str = "analyzer"

    @abstractmethod
    def analyze(self, resume_text: str, job_description_text: str) -> ScoreReport:
        pass


class HeuristicAnalyzer(ResumeAnalyzer):
    """Local, deterministic analyzer. Never fails and never touches the network."""

    name = "heuristic"

    def __init__(self, catalog: KeywordCatalog = DEFAULT_CATALOG):
        self.catalog = catalog

    def analyze(self, resume_text: str, job_description_text: str) -> ScoreReport:
        return composite_report(resume_text, job_description_text, catalog=self.catalog)


class LLMAnalyzer(ResumeAnalyzer):
    """
    Analyzer backed by an LLM provider.

    The provider is created lazily on first use so constructing the analyzer
    never requires API keys. Every failure (missing SDK or key, API error,
    unparseable response) surfaces as AnalysisServiceError.
    """

    def __init__(
        self,
        provider: Optional[LLMProvider] = None,
        provider_name: str = None,
        model: str = None,
    ):
        self._provider = provider
        self._provider_name = provider_name
        self._model = model

    @property
    def name(self) -> str:
        if self._provider is not None:
            return self._provider.name
        return self._provider_name or "llm"

    def _get_provider(self) -> LLMProvider:
        if self._provider is None:
            try:
                self._provider = get_provider(provider_name=self._provider_name, model=self._model)
            except (ImportError, ValueError) as e:
                raise AnalysisServiceError(
                    "LLM provider unavailable",
                    provider_name=self._provider_name,
                    original_error=e,
                ) from e
        return self._provider

    def analyze(self, resume_text: str, job_description_text: str) -> ScoreReport:
        """
        Ask the provider for a report in the camelCase wire shape.

        Raises:
            AnalysisServiceError: Provider unavailable, request failed, or
                response was not a usable JSON object
        """
        provider = self._get_provider()
        user_prompt = build_analysis_prompt(resume_text or "", job_description_text or "")

        try:
            response = provider.generate(
                system_prompt=ANALYSIS_SYSTEM_PROMPT, user_prompt=user_prompt
            )
        except Exception as e:
            raise AnalysisServiceError(
                "Analysis request failed", provider_name=provider.name, original_error=e
            ) from e

        data = parse_object_response(response.content)
        if data is None:
            raise AnalysisServiceError(
                "Response is not a JSON object",
                provider_name=provider.name,
                response_snippet=response.content,
            )

        try:
            report = ScoreReport.from_dict(data, source=provider.name)
        except ValueError as e:
            raise AnalysisServiceError(
                "Response does not match the score report shape",
                provider_name=provider.name,
                response_snippet=response.content,
                original_error=e,
            ) from e

        if report.reported_composite not in (None, report.composite_score):
            _log_debug(
                f"{provider.name} reported composite {report.reported_composite}, "
                f"sub-scores give {report.composite_score}"
            )
        return report


class FallbackAnalyzer(ResumeAnalyzer):
    """
    Try a primary analyzer, falling back to a secondary one on service failure.

    Only AnalysisServiceError triggers the fallback; programming errors in
    the primary propagate.
    """

    def __init__(self, primary: ResumeAnalyzer, fallback: ResumeAnalyzer = None):
        self.primary = primary
        self.fallback = fallback or HeuristicAnalyzer()

    @property
    def name(self) -> str:
        return f"{self.primary.name} (fallback: {self.fallback.name})"

    def analyze(self, resume_text: str, job_description_text: str) -> ScoreReport:
        try:
            return self.primary.analyze(resume_text, job_description_text)
        except AnalysisServiceError as e:
            log_fallback(self.primary.name, e)
            return self.fallback.analyze(resume_text, job_description_text)


def run_analysis(
    analyzer: ResumeAnalyzer, resume_text: str, job_description_text: str
) -> ScoreReport:
    """Run an analyzer with start/result logging and timing."""
    resume_text = resume_text or ""
    job_description_text = job_description_text or ""
    log_analysis_start(analyzer.name, len(resume_text), len(job_description_text))
    start_time = time.time()
    report = analyzer.analyze(resume_text, job_description_text)
    log_analysis_result(report, time.time() - start_time)
    return report
