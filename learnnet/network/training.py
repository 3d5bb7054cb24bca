# learnnet/network/training.py
from __future__ import annotations

from typing import Optional

from learnnet.config import get_config
from learnnet.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from learnnet.utils.logger import logs


def fit(N, verbosity: Optional[int] = None, inst=None):
    """
    Train every untrained machine on N's tape, dependencies first.

    Machines already trained are left untouched; shared machines train once.
    Returns N.
    """
    if verbosity is None or inst is None:
        cfg = get_config().network
        if verbosity is None:
            verbosity = cfg.verbosity
        if inst is None:
            inst = Instrumentation() if cfg.instrumentation else NoOpInstrumentation()

    for i, mach in enumerate(N.tape):
        if mach.state != 0:
            if verbosity > 1:
                logs.debug(f"[fit] Not retraining {mach!r}. It is up-to-date.")
            continue

        if verbosity > 0:
            logs.info(f"[fit] Training {mach!r}.")

        with inst.timer(f"{i}:{type(mach.model).__name__}"):
            mach.train(verbosity)

    return N


def reset(N) -> None:
    """
    Set every machine on N's tape to state 0 so the next fit() retrains all
    of them. Fit-results, caches and reports are kept until overwritten.
    """
    for mach in N.tape:
        mach.state = 0
