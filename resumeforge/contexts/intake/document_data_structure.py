"""
Resume document data structure for the Intake context.

ParsedDocument is the hand-off between intake and the scoring and rendering
contexts: header lines (name/contact block) followed by ordered, titled sections.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Section:
    """
    Titled group of content lines within a resume.

    Attributes:
        title: Cleaned, upper-cased section title (never empty)
        lines: Content lines in source order, excluding the header line itself
    """

    title: str
    lines: Tuple[str, ...] = ()

    @property
    def text(self) -> str:
        """Section content joined with newlines."""
        return "\n".join(self.lines)


@dataclass(frozen=True)
class ParsedDocument:
    """
    Structured view of a free-form resume.

    Attributes:
        header_lines: Lines found before the first section header
        sections: Sections in source order
    """

    header_lines: Tuple[str, ...] = ()
    sections: Tuple[Section, ...] = field(default_factory=tuple)

    @property
    def has_sections(self) -> bool:
        return len(self.sections) > 0

    @property
    def is_empty(self) -> bool:
        return not self.header_lines and not self.sections

    @property
    def section_titles(self) -> Tuple[str, ...]:
        return tuple(section.title for section in self.sections)

    def get_section(self, name: str) -> Optional[Section]:
        """
        Find the first section whose title contains name (case-insensitive).

        Args:
            name: Section name or fragment (e.g., "experience")

        Returns:
            Matching Section, or None if no title contains name
        """
        needle = name.upper().strip()
        for section in self.sections:
            if needle in section.title:
                return section
        return None

    def to_text(self) -> str:
        """
        Re-serialize to plain text with one blank line between blocks.
        """
        blocks = []
        if self.header_lines:
            blocks.append("\n".join(self.header_lines))
        for section in self.sections:
            blocks.append("\n".join((section.title,) + section.lines))
        return "\n\n".join(blocks)
