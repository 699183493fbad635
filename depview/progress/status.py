"""Phases of the background verification and their progress counters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

DEFAULT_PHASES = ("Geiger", "Trust")


class Stage(Enum):
    """Coarse stage of the computation, in the order they are reached."""

    NEW = 0
    COMPUTING = 1
    DONE = 2


@dataclass(frozen=True)
class Progress:
    """Work done so far in a phase. ``total`` is 0 until the source has an estimate."""

    done: int = 0
    total: int = 0


@dataclass(frozen=True)
class ComputationStatus:
    """Snapshot of where the computation is.

    ``phase_index`` indexes the ordered phase names and is only meaningful
    while the stage is COMPUTING.
    """

    stage: Stage = Stage.NEW
    phase_index: int = -1
    progress: Progress = field(default_factory=Progress)

    @classmethod
    def new(cls) -> "ComputationStatus":
        return cls()

    @classmethod
    def computing(cls, phase_index: int, done: int = 0, total: int = 0) -> "ComputationStatus":
        return cls(Stage.COMPUTING, phase_index, Progress(done, total))

    @classmethod
    def finished(cls) -> "ComputationStatus":
        return cls(Stage.DONE)

    def is_before_rows(self) -> bool:
        """True until the first phase starts; the table shows a placeholder meanwhile."""
        return self.stage is Stage.NEW

    @property
    def is_done(self) -> bool:
        return self.stage is Stage.DONE

    @property
    def rank(self) -> tuple[int, int]:
        """Position in the phase order; transitions must never lower it."""
        if self.stage is Stage.COMPUTING:
            return (self.stage.value, self.phase_index)
        return (self.stage.value, 0)


def phase_name(phases: tuple[str, ...], status: ComputationStatus) -> Optional[str]:
    """Return the name of the running phase, if any."""
    if status.stage is not Stage.COMPUTING:
        return None
    if 0 <= status.phase_index < len(phases):
        return phases[status.phase_index]
    return None
