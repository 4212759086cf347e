"""
LLM access for resume analysis and rewriting.

The scoring context never talks to an SDK directly: it receives an
LLMProvider, calls generate() with a system and user prompt, and parses
what comes back with parse_object_response() or strip_code_fences().
Providers retry their SDK's transient error (overload, rate limit) with
exponential backoff; every other failure propagates to the caller.

Provider selection follows LLM_PROVIDER ("openai" or "anthropic"), keys come
from OPENAI_API_KEY / ANTHROPIC_API_KEY. The SDKs are the optional
``resumeforge[llm]`` extra and are imported only when a provider is built.
"""

import json
import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

MAX_RETRIES = 5
BASE_DELAY = 1.0

# A full JSON score report with recommendations runs to a few thousand tokens
MAX_OUTPUT_TOKENS = 4096

DEFAULT_PROVIDER = "openai"

T = TypeVar("T")


def _retry_with_backoff(
    operation: Callable[[], T],
    retryable_exception: Type[Exception],
    error_message: str,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """
    Run operation, retrying on retryable_exception with doubling delays.

    Makes at most MAX_RETRIES attempts (delays 1s, 2s, 4s, ...). The last
    failure is re-raised unchanged; other exception types are never retried.

    Args:
        operation: Zero-argument callable performing one API request
        retryable_exception: Exception type treated as transient
        error_message: Prefix for the retry warning (e.g. "Rate limit hit")
        sleep: Delay function, replaced in tests
    """
    delays = [BASE_DELAY * 2**attempt for attempt in range(MAX_RETRIES - 1)]
    for attempt, delay in enumerate(delays, start=1):
        try:
            return operation()
        except retryable_exception:
            logger.warning(
                f"{error_message}, retrying in {delay:.1f}s (attempt {attempt}/{MAX_RETRIES})"
            )
            sleep(delay)
    return operation()


def _require_api_key(env_var: str) -> str:
    api_key = os.getenv(env_var)
    if not api_key:
        raise ValueError(f"{env_var} environment variable not set")
    return api_key


def _missing_sdk(package: str) -> ImportError:
    return ImportError(
        f"{package} package required. Install with: pip install 'resumeforge[llm]'"
    )


# =============================================================================
# PROVIDERS
# =============================================================================


@dataclass
class LLMResponse:
    """Text returned by a provider plus token usage for logging."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int


class LLMProvider(ABC):
    """
    A chat-completion backend that answers one system + user prompt.

    Subclasses set ``_provider_prefix`` and ``_retry_message`` on the class,
    set ``_retryable_exception`` in ``__init__`` (it usually comes from the
    lazily imported SDK), implement ``_call_api`` for a single request, and
    call ``update_model`` so ``name`` reads like "openai/gpt-4o".
    """

    _provider_prefix: str
    _retryable_exception: Type[Exception]
    _retry_message: str

    name: str
    model: str

    def update_model(self, model: str) -> None:
        self.model = model
        self.name = f"{self._provider_prefix}/{model}"

    @abstractmethod
    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        pass

    def generate(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        response = _retry_with_backoff(
            partial(self._call_api, system_prompt, user_prompt),
            self._retryable_exception,
            self._retry_message,
        )
        logger.debug(
            f"{self.name}: {response.input_tokens} tokens in, {response.output_tokens} out"
        )
        return response


class AnthropicProvider(LLMProvider):
    _provider_prefix = "anthropic"
    _retry_message = "Anthropic API overloaded"

    def __init__(self, model: str = "claude-sonnet-4-20250514"):
        try:
            import anthropic
        except ImportError as e:
            raise _missing_sdk("anthropic") from e

        self.client = anthropic.Anthropic(api_key=_require_api_key("ANTHROPIC_API_KEY"))
        self._retryable_exception = anthropic.OverloadedError
        self.update_model(model)

    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        message = self.client.messages.create(
            model=self.model,
            max_tokens=MAX_OUTPUT_TOKENS,
            temperature=0,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
        text = "".join(block.text for block in message.content if block.type == "text")
        return LLMResponse(
            content=text,
            model=self.model,
            input_tokens=message.usage.input_tokens,
            output_tokens=message.usage.output_tokens,
        )


class OpenAIProvider(LLMProvider):
    _provider_prefix = "openai"
    _retry_message = "OpenAI rate limit hit"

    def __init__(self, model: str = "gpt-4o"):
        try:
            import openai
        except ImportError as e:
            raise _missing_sdk("openai") from e

        self.client = openai.OpenAI(api_key=_require_api_key("OPENAI_API_KEY"))
        self._retryable_exception = openai.RateLimitError
        self.update_model(model)

    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        completion = self.client.chat.completions.create(
            model=self.model,
            max_tokens=MAX_OUTPUT_TOKENS,
            temperature=0,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )
        return LLMResponse(
            content=completion.choices[0].message.content or "",
            model=self.model,
            input_tokens=completion.usage.prompt_tokens,
            output_tokens=completion.usage.completion_tokens,
        )


PROVIDERS: Dict[str, Type[LLMProvider]] = {
    "anthropic": AnthropicProvider,
    "openai": OpenAIProvider,
}


def get_provider(provider_name: str = None, model: str = None) -> LLMProvider:
    """
    Build the configured provider.

    Args:
        provider_name: "anthropic" or "openai" (default: LLM_PROVIDER, then openai)
        model: Model name (default: the provider's own default)

    Raises:
        ValueError: Unknown provider or missing API key
        ImportError: Provider SDK not installed
    """
    name = (provider_name or os.getenv("LLM_PROVIDER", DEFAULT_PROVIDER)).lower()
    provider_class = PROVIDERS.get(name)
    if provider_class is None:
        raise ValueError(f"Unknown provider: {name}. Use one of: {', '.join(sorted(PROVIDERS))}")
    return provider_class(model=model) if model else provider_class()


# =============================================================================
# RESPONSE PARSING
# =============================================================================


def strip_code_fences(text: str) -> str:
    """
    Remove a Markdown code fence wrapped around a response.

    Example:
        >>> strip_code_fences('```json\\n{"a": 1}\\n```')
        '{"a": 1}'
    """
    text = text.strip()
    if not text.startswith("```"):
        return text
    _, newline, body = text.partition("\n")
    if not newline:
        return ""
    body = body.rstrip()
    if body.endswith("```"):
        body = body[:-3]
    return body.strip()


def _load_object(candidate: str) -> Optional[Dict[str, Any]]:
    try:
        value = json.loads(candidate)
    except json.JSONDecodeError:
        return None
    return value if isinstance(value, dict) else None


def parse_object_response(text: str) -> Optional[Dict[str, Any]]:
    """
    Recover a JSON object from a provider response.

    Models often wrap the object in a code fence or chat around it, so the
    fence-stripped text is tried first and then the outermost {...} span.
    Returns None when neither holds a JSON object.
    """
    text = strip_code_fences(text or "")
    parsed = _load_object(text)
    if parsed is not None:
        return parsed

    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end <= start:
        return None
    return _load_object(text[start : end + 1])
