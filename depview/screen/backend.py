"""Character-grid display backends.

The screen controller only needs three things from a terminal: its size, a
way to write styled text into a rectangle, and a way to wipe it. The rich
implementation positions the cursor with control codes and writes each line
of a region cropped and padded to the region width.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from rich.console import Console
from rich.control import Control
from rich.style import Style
from rich.text import Text

from .layout import Region

logger = logging.getLogger(__name__)

StyledText = Union[str, Text]


class DrawError(Exception):
    """Raised when the terminal cannot be written to."""


class DisplayBackend(ABC):
    """Interface of the surface the screen draws on."""

    @abstractmethod
    def surface_size(self) -> tuple[int, int]:
        """Return the current surface size as (width, height)."""
        pass

    @abstractmethod
    def draw_styled_text(self, region: Region, text: StyledText, style: Optional[Style] = None) -> None:
        """Fill a region with styled text.

        Every line of the region is rewritten: text lines are cropped to the
        region width and missing lines are blanked.

        Args:
            region: Target rectangle
            text: Rich markup string or a Text instance
            style: Base style applied under the text, padding included
        """
        pass

    @abstractmethod
    def clear_surface(self) -> None:
        """Erase the whole surface."""
        pass

    @contextmanager
    def frame(self) -> Iterator[None]:
        """Group the draws of one refresh."""
        yield


def to_text(text: StyledText, style: Optional[Style] = None) -> Text:
    """Convert markup or Text into a Text carrying the base style."""
    if isinstance(text, Text):
        result = text.copy()
        if style is not None:
            result.style = style
        return result
    return Text.from_markup(text, style=style or "")


def region_lines(region: Region, text: StyledText, style: Optional[Style] = None) -> list[Text]:
    """Split text into exactly ``region.height`` lines of ``region.width`` cells."""
    content = to_text(text, style)
    lines = list(content.split("\n", allow_blank=True))
    result = []
    for index in range(region.height):
        if index < len(lines):
            line = lines[index]
        else:
            line = Text(style=content.style)
        line.truncate(region.width, overflow="crop", pad=True)
        result.append(line)
    return result


class RichBackend(DisplayBackend):
    """Backend drawing through a rich Console."""

    def __init__(self, console: Optional[Console] = None, no_color: bool = False):
        self.console = console or Console(no_color=no_color, highlight=False)

    def surface_size(self) -> tuple[int, int]:
        size = self.console.size
        return size.width, size.height

    @contextmanager
    def _guard(self) -> Iterator[None]:
        try:
            yield
        except OSError as e:
            logger.error("terminal write failed: %s", e)
            raise DrawError(f"terminal write failed: {e}") from e

    def draw_styled_text(self, region: Region, text: StyledText, style: Optional[Style] = None) -> None:
        if region.is_empty:
            return
        with self._guard():
            for index, line in enumerate(region_lines(region, text, style)):
                self.console.control(Control.move_to(region.left, region.top + index))
                self.console.print(line, end="", soft_wrap=True, highlight=False)

    def clear_surface(self) -> None:
        with self._guard():
            self.console.control(Control.clear(), Control.home())

    @contextmanager
    def frame(self) -> Iterator[None]:
        with self._guard():
            with self.console:
                yield
