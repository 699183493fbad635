"""Table view: a column set drawn over a scrolling row buffer inside a region."""

from __future__ import annotations

from typing import Generic, Sequence

from rich.text import Text

from ..formatters.palette import StylePalette
from ..screen.layout import Region
from .buffer import Row, TableBuffer
from .columns import Column, allocate_widths, render_header, render_row

COLUMN_SEPARATOR = " "
HEADER_ROWS = 2


class TableView(Generic[Row]):
    """Renders the visible window of a row buffer with fixed columns.

    Column widths are derived from the region width and recomputed only when
    the region changes; rows are rendered only while they are visible.
    """

    def __init__(
        self,
        columns: Sequence[Column[Row]],
        palette: StylePalette,
        show_header: bool = False,
    ):
        self.columns = tuple(columns)
        self.palette = palette
        self.show_header = show_header
        self.buffer: TableBuffer[Row] = TableBuffer()
        self.region = Region()
        self.widths: list[int] = [0] * len(self.columns)

    def set_region(self, region: Region) -> None:
        """Move the view to a new region, re-deriving widths and viewport height."""
        if region.width != self.region.width:
            self.widths = allocate_widths(self.columns, region.width, spacing=len(COLUMN_SEPARATOR))
        self.region = region
        header = HEADER_ROWS if self.show_header else 0
        self.buffer.set_viewport_height(max(0, region.height - header))

    @property
    def row_count(self) -> int:
        return self.buffer.row_count

    def ingest(self, rows: Sequence[Row]) -> int:
        return self.buffer.ingest(rows)

    def scroll_by_lines(self, delta: int) -> None:
        self.buffer.scroll_by_lines(delta)

    def scroll_by_pages(self, delta: int) -> None:
        self.buffer.scroll_by_pages(delta)

    def scroll_to_top(self) -> None:
        self.buffer.scroll_to_top()

    def scroll_to_bottom(self) -> None:
        self.buffer.scroll_to_bottom()

    def render_lines(self) -> list[Text]:
        """Render the header (when enabled) and the visible rows, one Text per line."""
        lines = []
        if self.show_header and self.region.height >= HEADER_ROWS:
            header = render_header(self.columns, self.widths, self.palette.header, COLUMN_SEPARATOR)
            lines.append(header)
            lines.append(Text("─" * header.cell_len, style=self.palette.header))
        for row in self.buffer.visible_rows():
            lines.append(render_row(self.columns, self.widths, row, self.palette, COLUMN_SEPARATOR))
        return lines

    def render(self) -> Text:
        """Render the view as a single multi-line Text."""
        return Text("\n").join(self.render_lines())
