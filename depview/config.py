"""Viewer configuration assembled from command-line options and environment."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .progress.status import DEFAULT_PHASES

DEFAULT_REFRESH_RATE = 24.0


@dataclass(frozen=True)
class ViewConfig:
    """Settings of one viewer session."""

    title: str = "dependencies"
    no_color: bool = False
    show_header: bool = False
    refresh_rate: float = DEFAULT_REFRESH_RATE
    phases: tuple[str, ...] = DEFAULT_PHASES

    def __post_init__(self) -> None:
        if self.refresh_rate <= 0:
            raise ValueError(f"refresh rate must be positive, got {self.refresh_rate}")

    @property
    def refresh_interval(self) -> float:
        return 1.0 / self.refresh_rate

    @classmethod
    def from_args(cls, args: argparse.Namespace, environ: Optional[Mapping[str, str]] = None) -> "ViewConfig":
        """Build the configuration from parsed CLI options.

        NO_COLOR in the environment disables colors like --no-color does.
        """
        environ = os.environ if environ is None else environ
        return cls(
            title=args.title or os.path.basename(os.getcwd()) or cls.title,
            no_color=bool(args.no_color or environ.get("NO_COLOR")),
            show_header=bool(args.header),
            refresh_rate=args.fps,
        )
