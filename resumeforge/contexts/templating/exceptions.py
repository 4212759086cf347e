"""Custom exceptions for the templating context."""

from pathlib import Path
from typing import Optional


class FormDataError(Exception):
    """
    Exception raised when resume form data is missing or malformed.

    Attributes:
        message: Error description
        field_name: Form field at fault (e.g., "email", "experience[1]")
        source_path: File the form data was loaded from, if any
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        source_path: Optional[Path] = None,
    ):
        self.message = message
        self.field_name = field_name
        self.source_path = source_path

        parts = [message]

        if field_name:
            parts.append(f"Field: {field_name}")

        if source_path:
            parts.append(f"File: {source_path}")

        super().__init__("\n".join(parts))


class TemplateRenderError(Exception):
    """
    Exception raised when the resume template fails to render.

    Attributes:
        message: Error description
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_path:
            parts.append(f"Template: {template_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
