#!filepath: learnnet/observability/instrumentation.py
from __future__ import annotations

from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict

from learnnet.observability.timer import Timer


@dataclass
class Instrumentation:
    """
    Training-time accounting for a network.

    - timeline holds one entry per recorded (leaf) timer, in completion order
    - record=False timers only bound wall-time and leave no trace
    - a name recorded twice keeps the latest elapsed value
    """

    enabled: bool = True

    def __post_init__(self):
        self._timer = Timer(enabled=self.enabled)
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            inst._timer.start(name)
            try:
                yield
            finally:
                elapsed = inst._timer.end(name)
                if record:
                    inst.timeline[name] = elapsed

        return _ctx()

    def total(self) -> float:
        return float(sum(self.timeline.values()))


class NoOpInstrumentation:
    """Used when instrumentation is disabled."""

    def __init__(self):
        self.timeline: Dict[str, float] = {}

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def total(self) -> float:
        return 0.0


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
