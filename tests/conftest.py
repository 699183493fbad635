"""Pytest configuration and shared fixtures."""

from typing import Callable, Optional

import pytest

from depview.deps.models import Dep
from depview.screen.backend import DisplayBackend, StyledText, to_text
from depview.screen.layout import Region


class RecordingBackend(DisplayBackend):
    """Backend keeping the plain text last drawn in each region."""

    def __init__(self, width: int = 80, height: int = 24):
        self.width = width
        self.height = height
        self.contents: dict[Region, str] = {}
        self.draw_count = 0
        self.clear_count = 0
        self.fail_with: Optional[Exception] = None

    def surface_size(self) -> tuple[int, int]:
        return self.width, self.height

    def draw_styled_text(self, region: Region, text: StyledText, style=None) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.draw_count += 1
        self.contents[region] = to_text(text, style).plain

    def clear_surface(self) -> None:
        self.clear_count += 1
        self.contents.clear()

    def text_in(self, region: Region) -> str:
        return self.contents.get(region, "")

    def lines_in(self, region: Region) -> list[str]:
        return self.text_in(region).split("\n")


@pytest.fixture
def backend() -> RecordingBackend:
    """Return an 80x24 recording backend."""
    return RecordingBackend(80, 24)


@pytest.fixture
def make_deps() -> Callable[..., list[Dep]]:
    """Return a factory of uncomputed dependency rows named crate<N>."""

    def factory(count: int, start: int = 0) -> list[Dep]:
        return [Dep(f"crate{i}", "1.0.0") for i in range(start, start + count)]

    return factory
