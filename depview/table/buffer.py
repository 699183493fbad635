"""Append-only row storage with a clamped scroll window.

The buffer never copies or re-renders its history: rows are appended once and
only the slice inside the viewport is handed out for drawing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Sequence, TypeVar

Row = TypeVar("Row")


@dataclass
class ScrollState:
    """Scroll state of a table view.

    Invariant: 0 <= offset <= max_offset.
    """

    offset: int = 0
    viewport_height: int = 0
    total_rows: int = 0

    @property
    def max_offset(self) -> int:
        return max(0, self.total_rows - self.viewport_height)

    @property
    def at_bottom(self) -> bool:
        return self.offset == self.max_offset

    def clamp(self) -> None:
        self.offset = max(0, min(self.offset, self.max_offset))


class TableBuffer(Generic[Row]):
    """Row sequence plus the window of rows currently shown."""

    def __init__(self, viewport_height: int = 0):
        self._rows: list[Row] = []
        self.scroll = ScrollState(viewport_height=max(0, viewport_height))

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def offset(self) -> int:
        return self.scroll.offset

    @property
    def viewport_height(self) -> int:
        return self.scroll.viewport_height

    def append(self, rows: Iterable[Row]) -> None:
        """Append rows without moving the scroll offset.

        Following the tail is the caller's decision (see ``ingest``), so a
        user who scrolled up is not dragged back down.
        """
        self._rows.extend(rows)
        self.scroll.total_rows = len(self._rows)

    def ingest(self, rows: Sequence[Row]) -> int:
        """Take the new rows of an append-only sequence, following the tail.

        Rows before ``row_count`` are assumed to be the ones already stored.
        If the view was at the bottom before the append, it is moved to the
        new bottom afterwards.

        Returns:
            Number of rows appended
        """
        known = len(self._rows)
        if len(rows) <= known:
            return 0
        was_at_bottom = self.is_at_bottom()
        self.append(rows[known:])
        if was_at_bottom:
            self.scroll_to_bottom()
        return len(rows) - known

    def is_at_bottom(self) -> bool:
        return self.scroll.at_bottom

    def scroll_to_top(self) -> None:
        self.scroll.offset = 0

    def scroll_to_bottom(self) -> None:
        self.scroll.offset = self.scroll.max_offset

    def scroll_by_lines(self, delta: int) -> None:
        """Scroll by a number of rows; negative scrolls up. Clamps silently."""
        self.scroll.offset += delta
        self.scroll.clamp()

    def scroll_by_pages(self, delta: int) -> None:
        """Scroll by whole viewports; negative scrolls up."""
        self.scroll_by_lines(delta * self.scroll.viewport_height)

    def set_viewport_height(self, height: int) -> None:
        self.scroll.viewport_height = max(0, height)
        self.scroll.clamp()

    def visible_slice(self) -> range:
        """Indices of the rows inside the viewport."""
        start = self.scroll.offset
        end = min(start + self.scroll.viewport_height, len(self._rows))
        return range(start, max(start, end))

    def visible_rows(self) -> list[Row]:
        window = self.visible_slice()
        return self._rows[window.start:window.stop]

    def __len__(self) -> int:
        return len(self._rows)
