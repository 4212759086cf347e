"""Custom exceptions for the scoring context."""

from typing import Optional


class AnalysisServiceError(Exception):
    """
    Exception raised when the AI analysis or improvement service fails.

    Callers catch this and fall back to the local heuristic path.

    Attributes:
        message: Error description
        provider_name: Provider that failed (e.g., "openai/gpt-4o")
        response_snippet: Raw response text, when the failure was unparseable output
        original_error: The underlying exception, if any
    """

    def __init__(
        self,
        message: str,
        provider_name: Optional[str] = None,
        response_snippet: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.provider_name = provider_name
        self.response_snippet = response_snippet
        self.original_error = original_error

        parts = [message]

        if provider_name:
            parts.append(f"Provider: {provider_name}")

        if response_snippet:
            snippet = (
                response_snippet[:200] + "..." if len(response_snippet) > 200 else response_snippet
            )
            parts.append(f"\nResponse:\n{snippet}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
