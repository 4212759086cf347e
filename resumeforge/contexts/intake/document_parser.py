"""
Resume document parser.

Converts raw resume text into a ParsedDocument by folding a two-state
classifier over the trimmed, non-empty lines:

    BEFORE_FIRST_HEADER --header--> IN_SECTION --header--> IN_SECTION

Lines seen before the first header are header content (name/contact block);
lines after a header belong to that header's section. Parsing is total: any
string, including the empty string, produces a ParsedDocument.
"""

from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce
from typing import List, Optional, Tuple

from resumeforge.contexts.intake.document_data_structure import ParsedDocument, Section
from resumeforge.contexts.intake.logger import _log_debug
from resumeforge.contexts.intake.section_patterns import clean_section_title, is_section_header


class ParserState(Enum):
    BEFORE_FIRST_HEADER = "before_first_header"
    IN_SECTION = "in_section"


@dataclass(frozen=True)
class _FoldState:
    """Accumulator threaded through the line fold."""

    state: ParserState = ParserState.BEFORE_FIRST_HEADER
    header_lines: Tuple[str, ...] = ()
    closed_sections: Tuple[Section, ...] = ()
    open_section: Optional[Section] = None

    def finish(self) -> ParsedDocument:
        sections = self.closed_sections
        if self.open_section is not None:
            sections = sections + (self.open_section,)
        return ParsedDocument(header_lines=self.header_lines, sections=sections)


def split_lines(raw_text: str) -> List[str]:
    """Split text into trimmed lines, discarding blank ones."""
    return [line.strip() for line in raw_text.splitlines() if line.strip()]


def _step(acc: _FoldState, line: str) -> _FoldState:
    """Advance the classifier by one line."""
    if is_section_header(line):
        title = clean_section_title(line)
        if not title:
            # Pure decoration ("-----"): nothing to open or append
            return acc

        closed = acc.closed_sections
        if acc.open_section is not None:
            closed = closed + (acc.open_section,)
        return replace(
            acc,
            state=ParserState.IN_SECTION,
            closed_sections=closed,
            open_section=Section(title=title),
        )

    if acc.state is ParserState.BEFORE_FIRST_HEADER:
        return replace(acc, header_lines=acc.header_lines + (line,))

    section = acc.open_section
    return replace(acc, open_section=replace(section, lines=section.lines + (line,)))


def parse_document(raw_text: str) -> ParsedDocument:
    """
    Parse free-form resume text into header lines and ordered sections.

    Args:
        raw_text: Resume text (any string, including "")

    Returns:
        ParsedDocument. A document with no recognizable headers has all of its
        lines in header_lines and no sections.

    Example:
        >>> doc = parse_document("Jane Doe\\nEXPERIENCE\\nEngineer at Acme")
        >>> doc.header_lines
        ('Jane Doe',)
        >>> doc.sections[0].title, doc.sections[0].lines
        ('EXPERIENCE', ('Engineer at Acme',))
    """
    lines = split_lines(raw_text or "")
    document = reduce(_step, lines, _FoldState()).finish()

    _log_debug(
        f"Parsed {len(lines)} lines: {len(document.header_lines)} header lines, "
        f"{len(document.sections)} sections {list(document.section_titles)}"
    )
    return document
