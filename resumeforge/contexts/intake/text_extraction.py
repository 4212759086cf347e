"""
Text extraction collaborator contract.

Binary formats (PDF, Word) are decoded by an external service; this module only
fixes the interface and ships the plain-text implementation used by the
command-line scripts.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from resumeforge.contexts.intake.exceptions import (
    ExtractionFailedError,
    FileTooLargeError,
    UnsupportedFormatError,
)
from resumeforge.contexts.intake.logger import log_extraction_result

PLAIN_TEXT_TYPES = {"text/plain", ".txt", "txt", ".md", "md"}

# Extension -> declared type for callers that only have a path
DECLARED_TYPE_BY_SUFFIX = {
    ".txt": "text/plain",
    ".md": "text/plain",
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


MAX_UPLOAD_MB = 5


def validate_upload(
    source_name: str,
    size_bytes: int,
    declared_type: Optional[str] = None,
    max_size_mb: float = MAX_UPLOAD_MB,
) -> None:
    """
    Check an upload before extraction: known type (by declared type or file
    extension) and size within max_size_mb.

    Raises:
        UnsupportedFormatError: Neither the declared type nor the extension is known
        FileTooLargeError: size_bytes exceeds the limit
    """
    known_types = set(DECLARED_TYPE_BY_SUFFIX.values())
    suffix = Path(source_name).suffix.lower()
    if declared_type not in known_types and suffix not in DECLARED_TYPE_BY_SUFFIX:
        raise UnsupportedFormatError(
            "Invalid file type. Please upload PDF, DOCX, or TXT files only.",
            declared_type=declared_type or suffix or "<none>",
            source_name=source_name,
        )

    if size_bytes > max_size_mb * 1024 * 1024:
        raise FileTooLargeError(
            f"File size exceeds {max_size_mb}MB limit.",
            declared_type=declared_type,
            source_name=source_name,
        )


class TextExtractionService(ABC):
    """Turns uploaded file bytes into a plain string."""

    @abstractmethod
    def extract(self, data: bytes, declared_type: str, source_name: Optional[str] = None) -> str:
        """
        Extract text from file content.

        Raises:
            UnsupportedFormatError: If declared_type is not handled
            ExtractionFailedError: If the content cannot be decoded
        """
        pass


class PlainTextExtractor(TextExtractionService):
    """Decodes text/plain uploads."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def extract(self, data: bytes, declared_type: str, source_name: Optional[str] = None) -> str:
        if declared_type.lower() not in PLAIN_TEXT_TYPES:
            raise UnsupportedFormatError(
                "Unsupported file type. Only plain text can be extracted locally.",
                declared_type=declared_type,
                source_name=source_name,
            )
        try:
            text = data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise ExtractionFailedError(
                f"Failed to decode text as {self.encoding}: {e}",
                declared_type=declared_type,
                source_name=source_name,
            ) from e

        log_extraction_result(source_name or "<bytes>", declared_type, text)
        return text


def read_text_file(
    path: Union[str, Path], extractor: Optional[TextExtractionService] = None
) -> str:
    """
    Read a file through an extractor, deriving the declared type from its suffix.

    Args:
        path: File to read
        extractor: Extraction service (defaults to PlainTextExtractor)

    Returns:
        Extracted text

    Raises:
        UnsupportedFormatError: If the suffix is unknown or not handled by extractor
        FileTooLargeError: If the file exceeds MAX_UPLOAD_MB
        ExtractionFailedError: If the file cannot be read or decoded
    """
    path = Path(path)
    if extractor is None:
        extractor = PlainTextExtractor()

    declared_type = DECLARED_TYPE_BY_SUFFIX.get(path.suffix.lower())
    if declared_type is None:
        raise UnsupportedFormatError(
            "Unsupported file type. Please provide PDF, DOCX, or TXT files.",
            declared_type=path.suffix or "<none>",
            source_name=path.name,
        )

    try:
        validate_upload(path.name, path.stat().st_size, declared_type)
        data = path.read_bytes()
    except OSError as e:
        raise ExtractionFailedError(
            f"Failed to read file: {e}", declared_type=declared_type, source_name=path.name
        ) from e

    return extractor.extract(data, declared_type, source_name=path.name)
