"""Verification screen: composes layout, table view and status each refresh.

All views share a common layout: Title | Table | Status | Input + Hint
"""

from __future__ import annotations

import logging
from typing import Generic, Optional, Sequence

from rich.text import Text

from ..formatters.palette import StylePalette
from ..progress.status import DEFAULT_PHASES, ComputationStatus
from ..progress.tracker import StatusTracker
from ..source.store import DataSource, DepTable
from ..table.buffer import Row
from ..table.columns import Column
from ..table.view import TableView
from .backend import DisplayBackend
from .layout import LayoutManager

logger = logging.getLogger(__name__)


class VerifyScreen(Generic[Row]):
    """Draws the verification table and its chrome on a display backend.

    ``update_for`` performs one full, synchronous refresh. Scroll commands
    may arrive between refreshes and show up on the next one.
    """

    def __init__(
        self,
        backend: DisplayBackend,
        columns: Sequence[Column[Row]],
        title: str = "",
        palette: Optional[StylePalette] = None,
        phases: Sequence[str] = DEFAULT_PHASES,
        show_header: bool = False,
    ):
        self.backend = backend
        self.title = title
        self.palette = palette or StylePalette.default()
        self.layout = LayoutManager()
        self.tracker = StatusTracker(phases)
        self.table_view: TableView[Row] = TableView(columns, self.palette, show_header=show_header)

    @property
    def status(self) -> ComputationStatus:
        return self.tracker.current

    def resize(self) -> bool:
        """Re-check the surface size and re-lay out if it changed.

        Returns:
            True when the layout was recomputed (and the surface cleared)
        """
        width, height = self.backend.surface_size()
        if not self.layout.update(width, height):
            return False
        self.backend.clear_surface()
        self.table_view.set_region(self.layout.table)
        return True

    def update_for(self, table: DepTable) -> None:
        """Refresh the whole screen for a data source snapshot.

        Raises:
            DrawError: If the terminal cannot be written to
        """
        self.tracker.observe(table.computation_status)
        with self.backend.frame():
            self.resize()
            self.update_title()
            self.update_table_view(table.deps)
            self.update_status()
            self.update_input()
            self.update_hint()

    def refresh(self, source: DataSource) -> None:
        """Refresh from the latest snapshot of a data source."""
        self.update_for(source.snapshot())

    def update_title(self) -> None:
        self.backend.draw_styled_text(self.layout.title, Text(f"# {self.title}", style=self.palette.title))

    def update_table_view(self, rows: Sequence[Row]) -> None:
        if self.status.is_before_rows():
            self.backend.draw_styled_text(self.layout.table, self.tracker.placeholder_text(self.palette))
            return
        appended = self.table_view.ingest(rows)
        if appended:
            logger.debug("ingested %d rows (%d total)", appended, self.table_view.row_count)
        self.backend.draw_styled_text(self.layout.table, self.table_view.render())

    def update_status(self) -> None:
        self.backend.draw_styled_text(self.layout.status, self.tracker.status_text(self.palette))

    def update_input(self) -> None:
        # Only clears the area for now; reserved for echoing typed input.
        self.backend.draw_styled_text(self.layout.input, "")

    def update_hint(self) -> None:
        self.backend.draw_styled_text(self.layout.hint, self.tracker.hint_text(self.palette))

    def scroll_by_lines(self, lines_count: int) -> None:
        self.table_view.scroll_by_lines(lines_count)

    def scroll_by_pages(self, pages_count: int) -> None:
        """Scroll by whole viewports. pages_count can be negative."""
        self.table_view.scroll_by_pages(pages_count)

    def scroll_to_top(self) -> None:
        self.table_view.scroll_to_top()

    def scroll_to_bottom(self) -> None:
        self.table_view.scroll_to_bottom()
