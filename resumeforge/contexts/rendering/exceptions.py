"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Optional


class ThemeConfigError(Exception):
    """
    Exception raised when the theme table cannot be loaded.

    Attributes:
        message: Error description
        config_path: Theme file being loaded
        theme_id: Theme entry at fault, if the problem is entry-specific
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        theme_id: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.theme_id = theme_id

        parts = [message]
        if theme_id:
            parts.append(f"Theme: {theme_id}")
        if config_path:
            parts.append(f"File: {config_path}")

        super().__init__("\n".join(parts))


class UnsupportedFormatError(ValueError):
    """Raised when a document is requested in an output format with no serializer."""

    def __init__(self, fmt: str, supported: tuple = ()):
        self.fmt = fmt
        self.supported = supported
        message = f"Unsupported output format: '{fmt}'"
        if supported:
            message += f" (supported: {', '.join(supported)})"
        super().__init__(message)


class SerializationError(Exception):
    """
    Exception raised when a serializer fails to write a document.

    Attributes:
        message: Error description
        fmt: Output format being written
        original_error: The underlying library exception, if any
    """

    def __init__(
        self,
        message: str,
        fmt: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.fmt = fmt
        self.original_error = original_error

        parts = [message]
        if fmt:
            parts.append(f"Format: {fmt}")
        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
