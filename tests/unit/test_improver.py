"""Unit tests for resume improvers."""

import pytest

from resumeforge.contexts.scoring.exceptions import AnalysisServiceError
from resumeforge.contexts.scoring.heuristic_scorer import composite_report
from resumeforge.contexts.scoring.improver import (
    FallbackImprover,
    LLMImprover,
    RuleBasedImprover,
)
from resumeforge.contexts.scoring.keyword_catalog import build_catalog
from resumeforge.contexts.scoring.prompts import IMPROVEMENT_SYSTEM_PROMPT


@pytest.fixture
def report(sample_resume, sample_job_description):
    return composite_report(sample_resume, sample_job_description)


@pytest.mark.unit
class TestRuleBasedImprover:
    @pytest.mark.parametrize(
        "original, improved",
        [
            ("Responsible for the API", "Managed the API"),
            ("responsible for the API", "managed the API"),
            ("RESPONSIBLE FOR the API", "MANAGED the API"),
            ("Worked on search", "Developed search"),
            ("Helped with onboarding", "Assisted in onboarding"),
            ("I did the audit and made dashboards", "I executed the audit and created dashboards"),
            ("Handled   on-call", "Managed   on-call"),
            ("Responsible\nfor billing", "Managed billing"),
        ],
    )
    def test_replaces_weak_phrases(self, original, improved):
        assert RuleBasedImprover().replace_weak_phrases(original) == improved

    def test_whole_words_only(self):
        text = "Didactic materials were handmade by a madeup team"
        assert RuleBasedImprover().replace_weak_phrases(text) == text

    def test_empty_text(self):
        assert RuleBasedImprover().replace_weak_phrases("") == ""

    def test_custom_catalog(self):
        catalog = build_catalog(weak_verb_replacements={"utilized": "used"})
        improver = RuleBasedImprover(catalog)
        assert improver.replace_weak_phrases("Utilized Python") == "Used Python"

    def test_improve_ignores_report(self, report):
        improved = RuleBasedImprover().improve("Worked on APIs", "", report)
        assert improved == "Developed APIs"


@pytest.mark.unit
class TestLLMImprover:
    def test_returns_fence_stripped_rewrite(self, fake_provider, report):
        provider = fake_provider(content="```\nJane Doe\nLed platform work\n```")
        improved = LLMImprover(provider=provider).improve("Jane Doe", "jd", report)

        assert improved == "Jane Doe\nLed platform work"
        system_prompt, user_prompt = provider.calls[0]
        assert system_prompt == IMPROVEMENT_SYSTEM_PROMPT
        assert "Missing Skills: Kubernetes" in user_prompt

    def test_empty_rewrite_is_an_error(self, fake_provider, report):
        with pytest.raises(AnalysisServiceError, match="empty resume"):
            LLMImprover(provider=fake_provider(content="   ")).improve("a", "b", report)

    def test_request_failure(self, fake_provider, report):
        improver = LLMImprover(provider=fake_provider(error=ConnectionError("down")))
        with pytest.raises(AnalysisServiceError, match="Improvement request failed"):
            improver.improve("a", "b", report)

    def test_unknown_provider(self, report):
        with pytest.raises(AnalysisServiceError, match="LLM provider unavailable"):
            LLMImprover(provider_name="no-such-provider").improve("a", "b", report)


@pytest.mark.unit
class TestFallbackImprover:
    def test_falls_back_to_rule_based(self, fake_provider, report):
        primary = LLMImprover(provider=fake_provider(error=ConnectionError("down")))
        improved = FallbackImprover(primary).improve("Worked on APIs", "jd", report)
        assert improved == "Developed APIs"

    def test_primary_success(self, fake_provider, report):
        primary = LLMImprover(provider=fake_provider(content="Rewritten"))
        assert FallbackImprover(primary).improve("Worked on APIs", "jd", report) == "Rewritten"
