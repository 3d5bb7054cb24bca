# learnnet/network/node.py
from __future__ import annotations

from typing import Callable, Optional, Sequence

from learnnet.network.base import AbstractNode
from learnnet.network.machine import Machine, walk_tape
from learnnet.utils.errors import MalformedBlueprintError, NotTrainedError


class Node(AbstractNode):
    """
    Interior element of a learning network.

    - no machine   -> operation(*values)           (stateless combinator)
    - with machine -> operation applied to the machine's trained artifact

    Evaluation is lazy and uncached: every call re-evaluates the arguments.
    """

    def __init__(
        self,
        operation: Callable,
        *args: AbstractNode,
        machine: Optional[Machine] = None,
    ):
        if not callable(operation):
            raise MalformedBlueprintError(
                f"[Node] operation must be callable, got {type(operation).__name__}"
            )
        for arg in args:
            if not isinstance(arg, AbstractNode):
                raise MalformedBlueprintError(
                    f"[Node] arguments must be nodes or sources, "
                    f"got {type(arg).__name__}"
                )
        if machine is not None and not isinstance(machine, Machine):
            raise MalformedBlueprintError(
                f"[Node] expected a Machine, got {type(machine).__name__}"
            )

        self.operation = operation
        self.machine = machine
        self.args = tuple(args)

    # --------------------------------------------------
    @property
    def tape(self) -> list:
        """
        Every machine needed to evaluate this node, dependencies first.
        """
        return walk_tape(self)

    # --------------------------------------------------
    def __call__(self, *new):
        values = [arg(*new) for arg in self.args]

        mach = self.machine
        if mach is None:
            return self.operation(*values)

        if mach.state == 0:
            raise NotTrainedError(f"{mach!r} has not been trained")

        apply = getattr(self.operation, "apply", None)
        if apply is not None:
            return apply(mach.model, mach.fitresult, *values)
        return self.operation(mach.model, mach.fitresult, *values)

    def evaluate(self):
        return self()

    def fit(self, verbosity: Optional[int] = None, inst=None) -> "Node":
        from learnnet.network.training import fit

        return fit(self, verbosity=verbosity, inst=inst)

    def __repr__(self) -> str:
        op = getattr(self.operation, "__name__", repr(self.operation))
        if self.machine is None:
            return f"Node @{id(self) % 1000:03d} <{op}>"
        return (
            f"Node @{id(self) % 1000:03d} "
            f"<{op}({type(self.machine.model).__name__})>"
        )


def node(
    operation: Callable,
    *args: AbstractNode,
    machine: Optional[Machine] = None,
    model=None,
    training_args: Optional[Sequence[AbstractNode]] = None,
) -> Node:
    """
    Build a Node.

    - ``node(f, a, b)``                                   stateless
    - ``node(op, a, machine=mach)``                       existing machine
    - ``node(op, a, model=m, training_args=[X, y])``      new machine
    """
    if training_args is not None and model is None:
        raise MalformedBlueprintError("[node] training_args given without a model")
    if model is not None:
        if machine is not None:
            raise MalformedBlueprintError("[node] give either machine or model, not both")
        machine = Machine(model, *(training_args or ()))
    return Node(operation, *args, machine=machine)
