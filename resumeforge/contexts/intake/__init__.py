"""
Intake Context

Responsibilities:
- Splits raw resume text into trimmed, non-empty lines
- Classifies lines into header content (name/contact block) and titled sections
- Defines the text extraction collaborator contract

Owns: Line classification, ParsedDocument construction
Never: Scores content or decides how it is laid out
"""

from resumeforge.contexts.intake.document_data_structure import ParsedDocument, Section
from resumeforge.contexts.intake.document_parser import parse_document

__all__ = ["ParsedDocument", "Section", "parse_document"]
