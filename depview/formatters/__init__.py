"""Formatters package for depview output styling.

Usage:
    palette = StylePalette.create(no_color=False)
    output = OutputFormatter(no_color=False)
    output.print_error("terminal went away")
"""

from .output import OutputFormatter
from .palette import CellStyle, StylePalette

__all__ = [
    "OutputFormatter",
    "CellStyle",
    "StylePalette",
]
