"""String utilities for fitting cell text into fixed-width columns."""

from __future__ import annotations

from enum import Enum


class Alignment(Enum):
    """Horizontal alignment of text inside a column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def fit_text(text: str, width: int, alignment: Alignment = Alignment.LEFT) -> str:
    """Pad, align or truncate text to exactly ``width`` characters.

    Text longer than the width is cut on the right with no ellipsis marker.
    Centered text puts the odd leftover space on the right.

    Args:
        text: The text to fit
        width: Target width in characters (zero yields an empty string)
        alignment: Where to put the padding

    Returns:
        A string of length ``width``
    """
    if width <= 0:
        return ""
    if len(text) >= width:
        return text[:width]

    padding = width - len(text)
    if alignment is Alignment.RIGHT:
        return " " * padding + text
    if alignment is Alignment.CENTER:
        left = padding // 2
        return " " * left + text + " " * (padding - left)
    return text + " " * padding
