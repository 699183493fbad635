"""Partition of the terminal surface into the screen's named regions.

    row 0            title
    rows 1..h-4      table
    row h-3          status
    row h-2          input (left half) | hint (right remainder)
    row h-1          unused

Regions are recomputed only when the surface size changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# Rows used by the chrome: title above the table, status, input/hint
# and the blank last line below it.
TOP_ROWS = 1
BOTTOM_ROWS = 3
MIN_HEIGHT = TOP_ROWS + BOTTOM_ROWS + 1


@dataclass(frozen=True)
class Region:
    """Rectangular area of the surface, in character cells."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0


class LayoutManager:
    """Holds the screen regions derived from the last seen surface size."""

    def __init__(self):
        self.last_dimensions: Optional[tuple[int, int]] = None
        self.title = Region()
        self.table = Region()
        self.status = Region()
        self.input = Region()
        self.hint = Region()

    def update(self, width: int, height: int) -> bool:
        """Recompute regions for a surface size.

        Returns:
            False when the size is the one already laid out, True otherwise
        """
        width = max(0, width)
        height = max(0, height)
        if (width, height) == self.last_dimensions:
            return False

        logger.debug("surface resized to %dx%d", width, height)
        self.last_dimensions = (width, height)

        self.title = Region(0, 0, width, min(TOP_ROWS, height))
        if height < MIN_HEIGHT:
            self.table = Region(0, min(TOP_ROWS, height), width, 0)
            self.status = Region(0, height, width, 0)
            self.input = Region(0, height, width // 2, 0)
            self.hint = Region(width // 2, height, width - width // 2, 0)
            return True

        self.table = Region(0, TOP_ROWS, width, height - TOP_ROWS - BOTTOM_ROWS)
        self.status = Region(0, height - 3, width, 1)
        self.input = Region(0, height - 2, width // 2, 1)
        self.hint = Region(self.input.width, height - 2, width - self.input.width, 1)
        return True

    def regions(self) -> dict[str, Region]:
        return {
            "title": self.title,
            "table": self.table,
            "status": self.status,
            "input": self.input,
            "hint": self.hint,
        }
