"""Data source interface and a thread-safe in-memory implementation.

The producer (the verification run) writes from its own thread; the screen
reads a consistent snapshot once per refresh.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Iterable, Protocol, Union

from ..deps.models import Dep
from ..progress.status import ComputationStatus


class RowsView(Sequence):
    """Read-only view of the first ``length`` rows of an append-only list.

    Rows are never replaced or removed once stored, so a view taken at some
    point keeps describing the same rows while the list keeps growing.
    Only the rows actually indexed or sliced are copied.
    """

    def __init__(self, rows: list[Dep], length: int, lock: threading.RLock):
        self._rows = rows
        self._length = length
        self._lock = lock

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: Union[int, slice]) -> Union[Dep, list[Dep]]:
        if isinstance(index, slice):
            start, stop, step = index.indices(self._length)
            with self._lock:
                return self._rows[start:stop:step]
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("row index out of range")
        with self._lock:
            return self._rows[index]

    def __repr__(self) -> str:
        return f"RowsView(length={self._length})"


@dataclass(frozen=True)
class DepTable:
    """Snapshot of the rows and the computation status.

    ``deps`` is any sequence of rows; the store hands out a ``RowsView``
    rather than a copy of its history.
    """

    deps: Sequence[Dep]
    computation_status: ComputationStatus


class DataSource(Protocol):
    """What the screen reads from the verification run."""

    def current_rows(self) -> Sequence[Dep]:
        ...

    def current_status(self) -> ComputationStatus:
        ...

    def snapshot(self) -> DepTable:
        ...


class VerificationStore:
    """Shared state written by the producer and read by the screen.

    Rows are append-only; the status is replaced as a whole, so a reader
    never sees a half-updated progress counter.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self._deps: list[Dep] = []
        self._view = RowsView(self._deps, 0, self.lock)
        self._status = ComputationStatus.new()

    def append_rows(self, deps: Iterable[Dep]) -> None:
        with self.lock:
            self._deps.extend(deps)
            if len(self._deps) != len(self._view):
                self._view = RowsView(self._deps, len(self._deps), self.lock)

    def set_status(self, status: ComputationStatus) -> None:
        with self.lock:
            self._status = status

    def current_rows(self) -> Sequence[Dep]:
        with self.lock:
            return self._view

    def current_status(self) -> ComputationStatus:
        with self.lock:
            return self._status

    def snapshot(self) -> DepTable:
        with self.lock:
            return DepTable(self._view, self._status)
