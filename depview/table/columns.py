"""Column model: width bounds, alignment and per-row cell functions.

A table view owns an ordered, fixed list of columns. Widths are allocated
whenever the table region changes width; cells are produced on demand for
the rows currently on screen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

from rich.text import Text

from ..formatters.palette import CellStyle, StylePalette
from ..utils.string_utils import Alignment, fit_text

Row = TypeVar("Row")


@dataclass(frozen=True)
class StyledCell:
    """Text of one cell plus its style tag."""

    text: str
    style: CellStyle = CellStyle.STD


@dataclass(frozen=True)
class Column(Generic[Row]):
    """A table column.

    Attributes:
        name: Header label
        min_width: Width below which the column is hidden instead of shrunk
        max_width: Width the column never grows past
        cell_fn: Pure function from a row to its cell; must not raise
        alignment: How cell text is placed inside the allocated width
    """

    name: str
    min_width: int
    max_width: int
    cell_fn: Callable[[Row], StyledCell]
    alignment: Alignment = Alignment.LEFT

    def __post_init__(self) -> None:
        if self.min_width < 0:
            raise ValueError(f"Column '{self.name}': min_width must be non-negative")
        if self.min_width > self.max_width:
            raise ValueError(
                f"Column '{self.name}': min_width {self.min_width} exceeds max_width {self.max_width}"
            )


def allocate_widths(columns: Sequence[Column[Any]], available: int, spacing: int = 0) -> list[int]:
    """Distribute the available width across columns.

    When the minimum widths do not all fit, a prefix of columns gets exactly
    its minimum and every later column is hidden (width 0). Otherwise the
    remaining slack is handed out left to right, each column growing up to
    its maximum; slack nobody can absorb stays unused.

    Args:
        columns: Columns in display order
        available: Width of the containing region
        spacing: Separator width paid by every visible column after the first

    Returns:
        Allocated width per column, in the same order
    """
    available = max(0, available)
    costs = [
        column.min_width + (spacing if index > 0 else 0)
        for index, column in enumerate(columns)
    ]

    if sum(costs) > available:
        widths = []
        used = 0
        fitting = True
        for column, cost in zip(columns, costs):
            if fitting and used + cost <= available:
                widths.append(column.min_width)
                used += cost
            else:
                fitting = False
                widths.append(0)
        return widths

    slack = available - sum(costs)
    widths = []
    for column in columns:
        grow = min(slack, column.max_width - column.min_width)
        widths.append(column.min_width + grow)
        slack -= grow
    return widths


def render_cells(columns: Sequence[Column[Row]], widths: Sequence[int], row: Row) -> list[StyledCell]:
    """Render the visible cells of one row, fitted to their widths.

    Columns with zero width are skipped entirely; their cell function is
    not called.
    """
    cells = []
    for column, width in zip(columns, widths):
        if width == 0:
            continue
        cell = column.cell_fn(row)
        cells.append(StyledCell(fit_text(cell.text, width, column.alignment), cell.style))
    return cells


def render_row(
    columns: Sequence[Column[Row]],
    widths: Sequence[int],
    row: Row,
    palette: StylePalette,
    separator: str = " ",
) -> Text:
    """Render one row as a single styled line."""
    line = Text(no_wrap=True, overflow="crop")
    for index, cell in enumerate(render_cells(columns, widths, row)):
        if index > 0:
            line.append(separator)
        line.append(cell.text, style=palette.style_for(cell.style))
    return line


def render_header(
    columns: Sequence[Column[Any]],
    widths: Sequence[int],
    style: Any = None,
    separator: str = " ",
) -> Text:
    """Render the column names as a header line."""
    names = [
        fit_text(column.name, width, Alignment.CENTER)
        for column, width in zip(columns, widths)
        if width > 0
    ]
    return Text(separator.join(names), style=style or "", no_wrap=True, overflow="crop")
