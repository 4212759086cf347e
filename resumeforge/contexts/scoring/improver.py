"""
Resume improvers.

RuleBasedImprover rewrites weak phrases into strong action verbs using the
keyword catalog's replacement table; LLMImprover asks a provider for a full
rewrite steered by a ScoreReport. FallbackImprover mirrors FallbackAnalyzer.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional

from resumeforge.contexts.scoring.exceptions import AnalysisServiceError
from resumeforge.contexts.scoring.keyword_catalog import DEFAULT_CATALOG, KeywordCatalog
from resumeforge.contexts.scoring.logger import _log_debug, _log_warning
from resumeforge.contexts.scoring.prompts import (
    IMPROVEMENT_SYSTEM_PROMPT,
    build_improvement_prompt,
)
from resumeforge.contexts.scoring.score_report import ScoreReport
from resumeforge.utils.llm import LLMProvider, get_provider, strip_code_fences


class ResumeImprover(ABC):
    """Rewrites resume text using the findings of a ScoreReport."""

    name: str = "improver"

    @abstractmethod
    def improve(self, resume_text: str, job_description_text: str, report: ScoreReport) -> str:
        pass


def _match_case(replacement: str, original: str) -> str:
    """Carry the capitalization of the replaced phrase over to its replacement."""
    if original.isupper() and len(original) > 1:
        return replacement.upper()
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


class RuleBasedImprover(ResumeImprover):
    """
    Replace weak phrases with strong verbs, case-insensitively and by whole word.

    Example:
        >>> RuleBasedImprover().replace_weak_phrases("Responsible for the API")
        'Managed the API'
    """

    name = "rule-based"

    def __init__(self, catalog: KeywordCatalog = DEFAULT_CATALOG):
        self.catalog = catalog

    def replace_weak_phrases(self, text: str) -> str:
        improved = text or ""
        # Longest phrases first so "responsible for" wins over any shorter overlap
        for weak in sorted(self.catalog.weak_verb_replacements, key=len, reverse=True):
            strong = self.catalog.weak_verb_replacements[weak]
            pattern = r"\b" + r"\s+".join(re.escape(part) for part in weak.split()) + r"\b"
            improved = re.sub(
                pattern,
                lambda match, strong=strong: _match_case(strong, match.group(0)),
                improved,
                flags=re.IGNORECASE,
            )
        return improved

    def improve(self, resume_text: str, job_description_text: str, report: ScoreReport) -> str:
        return self.replace_weak_phrases(resume_text)


class LLMImprover(ResumeImprover):
    """Improver backed by an LLM provider; failures raise AnalysisServiceError."""

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

    def improve(self, resume_text: str, job_description_text: str, report: ScoreReport) -> str:
        if self._provider is None:
            try:
                self._provider = get_provider(provider_name=self._provider_name, model=self._model)
            except (ImportError, ValueError) as e:
                raise AnalysisServiceError(
                    "LLM provider unavailable",
                    provider_name=self._provider_name,
                    original_error=e,
                ) from e

        user_prompt = build_improvement_prompt(
            resume_text or "", job_description_text or "", report
        )
        try:
            response = self._provider.generate(
                system_prompt=IMPROVEMENT_SYSTEM_PROMPT, user_prompt=user_prompt
            )
        except Exception as e:
            raise AnalysisServiceError(
                "Improvement request failed", provider_name=self._provider.name, original_error=e
            ) from e

        improved = strip_code_fences(response.content or "")
        if not improved:
            raise AnalysisServiceError(
                "Provider returned an empty resume", provider_name=self._provider.name
            )
        _log_debug(f"{self._provider.name} rewrote resume ({len(improved)} chars)")
        return improved


class FallbackImprover(ResumeImprover):
    """Try a primary improver, falling back to rule-based rewriting on service failure."""

    def __init__(self, primary: ResumeImprover, fallback: ResumeImprover = None):
        self.primary = primary
        self.fallback = fallback or RuleBasedImprover()

    @property
    def name(self) -> str:
        return f"{self.primary.name} (fallback: {self.fallback.name})"

    def improve(self, resume_text: str, job_description_text: str, report: ScoreReport) -> str:
        try:
            return self.primary.improve(resume_text, job_description_text, report)
        except AnalysisServiceError as e:
            _log_warning(f"{self.primary.name} failed, falling back to {self.fallback.name}")
            _log_debug(f"  Cause: {e}")
            return self.fallback.improve(resume_text, job_description_text, report)
