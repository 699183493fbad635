"""Progress model of the background verification."""

from .status import DEFAULT_PHASES, ComputationStatus, Progress, Stage
from .tracker import StatusTracker

__all__ = ["DEFAULT_PHASES", "ComputationStatus", "Progress", "Stage", "StatusTracker"]
