"""Style palette shared by the table cells and the screen chrome.

The palette is built once at startup and handed to every component that
draws, so that no component reaches for module-level style state.

Usage:
    palette = StylePalette.default()
    palette.style_for(CellStyle.GOOD)  # Style(color="green")
"""

from dataclasses import dataclass
from enum import Enum

from rich.style import Style


class CellStyle(Enum):
    """Closed set of style tags a cell function may choose from."""

    STD = "std"
    BAD = "bad"
    MEDIUM = "medium"
    GOOD = "good"
    NONE = "none"


@dataclass(frozen=True)
class StylePalette:
    """Resolved rich styles for cells and chrome."""

    std: Style
    bad: Style
    medium: Style
    good: Style
    none: Style
    title: Style
    header: Style
    status: Style
    status_emphasis: Style
    emphasis: Style
    placeholder: Style

    @classmethod
    def default(cls) -> "StylePalette":
        """Build the colored palette."""
        return cls(
            std=Style(),
            bad=Style(color="white", bgcolor="red"),
            medium=Style(color="yellow"),
            good=Style(color="green"),
            none=Style(color="grey42"),
            title=Style(bold=True, color="color(178)"),
            header=Style(bold=True, color="color(178)"),
            status=Style(bgcolor="grey15"),
            status_emphasis=Style(italic=True, color="color(225)", bgcolor="grey15"),
            emphasis=Style(bold=True, color="yellow"),
            placeholder=Style(italic=True, color="color(153)"),
        )

    @classmethod
    def plain(cls) -> "StylePalette":
        """Build a palette without colors, keeping only text attributes."""
        return cls(
            std=Style(),
            bad=Style(reverse=True),
            medium=Style(),
            good=Style(),
            none=Style(dim=True),
            title=Style(bold=True),
            header=Style(bold=True),
            status=Style(),
            status_emphasis=Style(italic=True),
            emphasis=Style(bold=True),
            placeholder=Style(italic=True),
        )

    @classmethod
    def create(cls, no_color: bool = False) -> "StylePalette":
        """Build the palette matching the color setting."""
        return cls.plain() if no_color else cls.default()

    def style_for(self, cell_style: CellStyle) -> Style:
        """Resolve a cell style tag to a rich style."""
        return getattr(self, cell_style.value)
