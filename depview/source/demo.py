"""Synthetic verification run used by the CLI to drive the viewer."""

from __future__ import annotations

import random
import threading
from typing import Optional, Sequence

from ..deps.models import ComputedDep, CountPair, Dep, TrustedPair, VerificationStatus
from ..progress.status import DEFAULT_PHASES, ComputationStatus
from .store import VerificationStore

NAME_PARTS = [
    "serde", "tokio", "rand", "log", "syn", "quote", "proc", "macro", "regex",
    "libc", "bytes", "futures", "hyper", "mio", "url", "time", "chrono", "json",
    "cfg", "if", "core", "derive", "util", "sys", "io", "http", "tls", "ring",
]


def make_dep(rng: random.Random, computed: bool = True) -> Dep:
    """Build a plausible dependency row."""
    name = "-".join(rng.sample(NAME_PARTS, rng.randint(1, 3)))
    version = f"{rng.randint(0, 3)}.{rng.randint(0, 20)}.{rng.randint(0, 30)}"
    if not computed:
        return Dep(name, version)

    trust = rng.choice(list(VerificationStatus))
    latest = rng.choice([None, version, f"{rng.randint(0, 3)}.{rng.randint(0, 20)}.0"])
    total_downloads = rng.randint(0, 50_000_000)
    return Dep(
        name,
        version,
        ComputedDep(
            trust=trust,
            reviews=CountPair(rng.randint(0, 3), rng.randint(0, 12)),
            issues=TrustedPair(rng.choice([0, 0, 0, 1]), rng.choice([0, 0, 1, 3])),
            latest_trusted_version=latest,
            downloads=CountPair(rng.randint(0, total_downloads), total_downloads),
            owners=TrustedPair(rng.randint(0, 2), rng.randint(1, 6)),
            loc=rng.randint(0, 400_000),
        ),
    )


class DemoVerification:
    """Producer thread walking through the phases and appending rows.

    Rows are appended during the first phase; the later phases only advance
    their progress counters.
    """

    def __init__(
        self,
        store: VerificationStore,
        row_count: int = 200,
        delay: float = 0.05,
        phases: Sequence[str] = DEFAULT_PHASES,
        seed: Optional[int] = None,
    ):
        self.store = store
        self.row_count = row_count
        self.delay = delay
        self.phases = tuple(phases)
        self.rng = random.Random(seed)
        self.stop_flag = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def run(self) -> None:
        """Run the whole computation synchronously."""
        self._sleep(self.delay * 10)
        for phase_index in range(len(self.phases)):
            for done in range(self.row_count + 1):
                if self.stop_flag.is_set():
                    return
                if phase_index == 0 and done > 0:
                    self.store.append_rows([make_dep(self.rng)])
                self.store.set_status(ComputationStatus.computing(phase_index, done, self.row_count))
                self._sleep(self.delay)
        self.store.set_status(ComputationStatus.finished())

    def _sleep(self, seconds: float) -> None:
        if seconds > 0:
            self.stop_flag.wait(seconds)

    def start(self) -> None:
        self.stop_flag.clear()
        self._thread = threading.Thread(target=self.run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self.stop_flag.set()
        if self._thread is not None and self._thread.is_alive():
            self._thread.join(timeout=1.0)
