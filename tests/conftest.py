"""Shared fixtures: sample resume and job description text, fake LLM providers."""

import pytest

from resumeforge.utils.llm import LLMProvider, LLMResponse

SAMPLE_RESUME = """Jane Doe
Senior Software Engineer
jane.doe@example.com | 555-123-4567 | Austin, TX

PROFESSIONAL SUMMARY
Backend engineer with 8 years building Python services.

TECHNICAL SKILLS
Python, Django, PostgreSQL, Docker, AWS

PROFESSIONAL EXPERIENCE
Senior Engineer | Acme Corp | 2020 - Present
• Led a team of 5 engineers to rebuild the billing platform
• Optimized query latency by 40%

EDUCATION
BS Computer Science
State University | 2012 - 2016
"""

SAMPLE_JOB_DESCRIPTION = (
    "We are hiring a backend engineer with Python, Django, Kubernetes and PostgreSQL."
)


class FakeProvider(LLMProvider):
    """In-memory provider: returns canned content or raises a canned error."""

    _provider_prefix = "fake"
    _retry_message = "Fake provider busy"

    def __init__(self, content: str = "", error: Exception = None):
        self._retryable_exception = TimeoutError
        self.content = content
        self.error = error
        self.calls = []
        self.update_model("test-model")

    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.content, model=self.model, input_tokens=12, output_tokens=34)


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_job_description() -> str:
    return SAMPLE_JOB_DESCRIPTION


@pytest.fixture
def fake_provider():
    """Factory for FakeProvider instances."""
    return FakeProvider
