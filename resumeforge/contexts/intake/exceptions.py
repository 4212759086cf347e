"""Custom exceptions for the intake context (text extraction collaborators)."""

from typing import Optional


class TextExtractionError(Exception):
    """
    Base exception for text extraction failures.

    Attributes:
        message: Error description
        declared_type: MIME type or extension the caller declared
        source_name: Optional file name, for error messages
    """

    def __init__(
        self,
        message: str,
        declared_type: Optional[str] = None,
        source_name: Optional[str] = None,
    ):
        self.message = message
        self.declared_type = declared_type
        self.source_name = source_name

        parts = [message]
        if source_name:
            parts.append(f"Source: {source_name}")
        if declared_type:
            parts.append(f"Declared type: {declared_type}")

        super().__init__("\n".join(parts))


class UnsupportedFormatError(TextExtractionError):
    """Raised when no extractor handles the declared type."""

    pass


class ExtractionFailedError(TextExtractionError):
    """Raised when an extractor accepts the type but cannot decode the content."""

    pass


class FileTooLargeError(TextExtractionError):
    """Raised when an upload exceeds the size limit."""

    pass
