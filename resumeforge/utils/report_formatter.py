"""
Plain-text report tables for the command-line scripts.

TableFormatter accumulates lines (banners, a header row, aligned data rows,
bullet lists) and joins them on render(). Every add_* method returns the
formatter so calls can be chained.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List


@dataclass(frozen=True)
class Column:
    """A fixed-width column; align is a format-spec alignment ('<', '>' or '^')."""

    name: str
    width: int
    align: str = "<"

    def cell(self, value: Any) -> str:
        return f"{str(value):{self.align}{self.width}}"


class TableFormatter:
    """Line builder for fixed-width text tables."""

    def __init__(self, columns: List[Column], total_width: int = 72):
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def _join_cells(self, values: Iterable[Any]) -> str:
        # Trailing padding of the last column is dropped
        return " ".join(col.cell(value) for col, value in zip(self.columns, values)).rstrip()

    def add_section_header(self, title: str) -> "TableFormatter":
        """Title between two '=' rules spanning total_width."""
        rule = "=" * self.total_width
        self.lines.extend([rule, title, rule])
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(self._join_cells(col.name for col in self.columns))
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Append one data row.

        Raises:
            ValueError: values and columns differ in length
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")
        self.lines.append(self._join_cells(values))
        return self

    def add_bullets(
        self, title: str, items: Iterable[str], empty_text: str = "none"
    ) -> "TableFormatter":
        """
        Titled "  - item" list after a blank line.

        Example:
            >>> TableFormatter([]).add_bullets("Missing skills", []).render()
            '\\nMissing skills:\\n  none'
        """
        items = list(items)
        self.lines.append(f"\n{title}:")
        self.lines.extend(f"  - {item}" for item in items)
        if not items:
            self.lines.append(f"  {empty_text}")
        return self

    def add_blank_line(self) -> "TableFormatter":
        return self.add_text("")

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_score_bar(score: int, width: int = 20, fill: str = "#", empty: str = ".") -> str:
    """
    Fixed-width bar for a 0-100 score; out-of-range scores are clamped.

    Example:
        >>> format_score_bar(75, width=8)
        '######..'
    """
    filled = max(0, min(width, round(score * width / 100)))
    return fill * filled + empty * (width - filled)
