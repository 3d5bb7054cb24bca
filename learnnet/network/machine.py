# learnnet/network/machine.py
from __future__ import annotations

from typing import Any

from learnnet.network.base import AbstractNode
from learnnet.utils.errors import MalformedBlueprintError


class Machine:
    """
    Binds a model to training-argument nodes and owns what training produces.

    state:
      0  -> never trained (or reset); next fit() trains from scratch
      n  -> trained n times

    Mutation is unsynchronized; callers serialize training of one machine.
    """

    def __init__(self, model, *args: AbstractNode):
        for arg in args:
            if not isinstance(arg, AbstractNode):
                raise MalformedBlueprintError(
                    f"[Machine] training arguments must be nodes or sources, "
                    f"got {type(arg).__name__}"
                )

        self.model = model
        self.args = tuple(args)

        self.state: int = 0
        self.fitresult: Any = None
        self.cache: Any = None
        self.report: Any = None

    # --------------------------------------------------
    @property
    def tape(self) -> list:
        """Machines this one depends on, then itself."""
        return walk_tape(self)

    @property
    def is_trained(self) -> bool:
        return self.state > 0

    # --------------------------------------------------
    def train(self, verbosity: int = 1) -> "Machine":
        """
        Evaluate the training arguments and fit (state 0) or update the model.

        Errors raised by the model propagate unchanged.
        """
        values = [arg() for arg in self.args]

        if self.state == 0:
            fitresult, cache, report = self.model.fit(verbosity, *values)
        else:
            fitresult, cache, report = self.model.update(
                verbosity, self.fitresult, self.cache, *values
            )

        self.fitresult = fitresult
        self.cache = cache
        self.report = report
        self.state += 1
        return self

    def __repr__(self) -> str:
        return (
            f"Machine @{id(self) % 1000:03d} "
            f"<{type(self.model).__name__}, state={self.state}>"
        )


def machine(model, *args: AbstractNode) -> Machine:
    return Machine(model, *args)


def walk_tape(root) -> list:
    """
    Machines reachable from ``root``, dependencies first, each once.

    Iterative post-order walk; every node, source and machine is expanded
    at most once, however many paths lead to it.
    """
    tape = []
    seen = set()
    stack = [(root, False)]

    while stack:
        obj, expanded = stack.pop()
        if expanded:
            if isinstance(obj, Machine):
                tape.append(obj)
            continue
        if id(obj) in seen:
            continue
        seen.add(id(obj))

        stack.append((obj, True))
        children = list(getattr(obj, "args", ()))
        mach = getattr(obj, "machine", None)
        if mach is not None:
            children.append(mach)
        stack.extend((child, False) for child in reversed(children))

    return tape
