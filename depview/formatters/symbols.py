"""Markers prefixing the lines printed after the viewer exits.

The summary and error lines start with a check, a warning sign or a cross.
Emoji are used on UTF terminals with colors enabled; elsewhere the markers
fall back to single ASCII characters.
"""

import platform
import sys
from dataclasses import dataclass
from functools import cached_property


@dataclass(frozen=True)
class Symbol:
    """A marker as emoji and as its ASCII replacement."""

    emoji: str
    ascii: str


class Symbols:
    Check = Symbol("✅", "+")
    Cross = Symbol("❌", "x")
    Warning = Symbol("⚠️", "!")


class SymbolsFormatter:
    """Picks the emoji or ASCII form of the summary markers."""

    def __init__(self, no_color: bool = False):
        self._no_color = no_color

    @cached_property
    def supports_emoji(self) -> bool:
        if self._no_color or platform.system() == "Windows":
            return False
        encoding = getattr(sys.stdout, "encoding", None)
        return bool(encoding) and encoding.lower().replace("-", "").startswith("utf")

    def get(self, symbol: Symbol) -> str:
        if self.supports_emoji:
            return symbol.emoji
        return symbol.ascii

    @property
    def Check(self) -> str:
        return self.get(Symbols.Check)

    @property
    def Cross(self) -> str:
        return self.get(Symbols.Cross)

    @property
    def Warning(self) -> str:
        return self.get(Symbols.Warning)
