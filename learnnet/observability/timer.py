#!filepath: learnnet/observability/timer.py
from __future__ import annotations

import time
from collections import defaultdict
from typing import DefaultDict, Dict, List


class Timer:
    """
    Named wall-clock timer.

    A name may be started again before it ends (a model retrained inside
    another model's training); each end() closes the innermost run.
    Completed runs accumulate into ``totals`` / ``counts``.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._running: DefaultDict[str, List[float]] = defaultdict(list)
        self.totals: Dict[str, float] = {}
        self.counts: Dict[str, int] = {}

    def start(self, name: str) -> None:
        if self.enabled:
            self._running[name].append(time.perf_counter())

    def end(self, name: str) -> float:
        """Seconds since the matching start(); 0.0 when nothing is running."""
        if not self.enabled or not self._running.get(name):
            return 0.0

        elapsed = time.perf_counter() - self._running[name].pop()
        self.totals[name] = self.totals.get(name, 0.0) + elapsed
        self.counts[name] = self.counts.get(name, 0) + 1
        return elapsed

    def running(self) -> List[str]:
        return [name for name, starts in self._running.items() if starts]
