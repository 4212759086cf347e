"""
Page layout data structures.

A PageLayout is the device-independent result of laying out a resume: every
text run and rule has an absolute position on a numbered page. Coordinates are
in page units (millimetres for the default A4 geometry) measured from the
top-left corner, with y growing downwards to the text baseline. Serializers
convert to their own coordinate systems.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, Tuple

from resumeforge.contexts.rendering.font_metrics import resolve_font_name

RGB = Tuple[int, int, int]

MM_PER_INCH = 25.4
POINTS_PER_INCH = 72


@dataclass(frozen=True)
class PageGeometry:
    """
    Page size and margin.

    Attributes:
        width: Page width in page units
        height: Page height in page units
        margin: Margin on every side in page units
        points_per_unit: PDF points per page unit (72/25.4 for millimetres)
    """

    width: float = 210.0
    height: float = 297.0
    margin: float = 20.0
    points_per_unit: float = POINTS_PER_INCH / MM_PER_INCH

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def width_points(self) -> float:
        return self.width * self.points_per_unit

    @property
    def height_points(self) -> float:
        return self.height * self.points_per_unit


A4 = PageGeometry()
US_LETTER = PageGeometry(width=215.9, height=279.4)


@dataclass(frozen=True)
class RunStyle:
    """Typographic style of a text run. size is in points."""

    bold: bool
    color: RGB
    size: float
    font_family: str = "helvetica"

    @property
    def font_name(self) -> str:
        return resolve_font_name(self.font_family, self.bold)


@dataclass(frozen=True)
class PlacedRun:
    """A single line of text drawn with its baseline starting at (x, y)."""

    text: str
    style: RunStyle
    x: float
    y: float


@dataclass(frozen=True)
class PlacedRule:
    """A straight line from (x1, y1) to (x2, y2); thickness is in page units."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: RGB
    thickness: float


@dataclass(frozen=True)
class Page:
    number: int
    runs: Tuple[PlacedRun, ...] = ()
    rules: Tuple[PlacedRule, ...] = ()

    @property
    def is_blank(self) -> bool:
        return not self.runs and not self.rules


@dataclass(frozen=True)
class PageLayout:
    """
    Pages of placed runs and rules.

    Invariant: at least one page, numbered from 1, and no run's baseline below
    geometry.height - geometry.margin.
    """

    geometry: PageGeometry
    pages: Tuple[Page, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def iter_runs(self) -> Iterator[Tuple[int, PlacedRun]]:
        """Yield (page number, run) in drawing order."""
        for page in self.pages:
            for run in page.runs:
                yield page.number, run

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dicts and lists, suitable for JSON."""
        return asdict(self)
