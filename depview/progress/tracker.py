"""Validation of status transitions and the chrome text derived from the status."""

from __future__ import annotations

import logging
from typing import Sequence

from rich.text import Text

from ..formatters.palette import StylePalette
from .status import DEFAULT_PHASES, ComputationStatus, Stage, phase_name

logger = logging.getLogger(__name__)

PLACEHOLDER_MESSAGE = "preparing table... You may quit at any time with ctrl-q"
QUIT_KEYS = "ctrl-q"
SCROLL_KEYS = ("PageUp", "PageDown")


class StatusTracker:
    """Keeps the last valid status reported by the data source.

    The source drives every transition; this class only refuses the ones
    that go backward in the phase order, or name a phase that does not
    exist, and keeps showing the previous state instead.
    """

    def __init__(self, phases: Sequence[str] = DEFAULT_PHASES):
        if not phases:
            raise ValueError("At least one phase is required")
        self.phases = tuple(phases)
        self.current = ComputationStatus.new()
        self.rejected = 0

    def observe(self, status: ComputationStatus) -> ComputationStatus:
        """Accept the source's status if it is a valid successor of the current one.

        Returns:
            The status now in effect
        """
        if status == self.current:
            return self.current
        if status.stage is Stage.COMPUTING and phase_name(self.phases, status) is None:
            self._reject(status, "unknown phase")
        elif status.rank < self.current.rank:
            self._reject(status, "backward transition")
        else:
            self.current = status
        return self.current

    def _reject(self, status: ComputationStatus, reason: str) -> None:
        self.rejected += 1
        logger.warning(
            "ignoring status %s from data source (%s), keeping %s",
            status, reason, self.current,
        )

    def status_text(self, palette: StylePalette) -> Text:
        """Status line for the current state."""
        status = self.current
        line = Text(style=palette.status)
        if status.stage is Stage.NEW:
            line.append("Computation starting...")
        elif status.stage is Stage.DONE:
            line.append("Computation finished")
        else:
            progress = status.progress
            line.append(f"Computing {phase_name(self.phases, status)} : ")
            line.append(str(progress.done), style=palette.status_emphasis)
            line.append(f" / {progress.total}")
        return line

    def hint_text(self, palette: StylePalette) -> Text:
        """Key hint; scroll keys are only advertised once the table is live."""
        line = Text("Hit ")
        line.append(QUIT_KEYS, style=palette.emphasis)
        line.append(" to quit")
        if not self.current.is_before_rows():
            line.append(", ")
            line.append(SCROLL_KEYS[0], style=palette.emphasis)
            line.append(" or ")
            line.append(SCROLL_KEYS[1], style=palette.emphasis)
            line.append(" to scroll")
        return line

    @staticmethod
    def placeholder_text(palette: StylePalette) -> Text:
        """Table content shown before the first phase starts."""
        text = Text("\n")
        text.append(PLACEHOLDER_MESSAGE, style=palette.placeholder)
        return text
