# learnnet/network/operations.py
from __future__ import annotations

from learnnet.network.base import AbstractNode
from learnnet.network.machine import Machine
from learnnet.network.node import Node
from learnnet.utils.errors import MalformedBlueprintError


class Operation:
    """
    A model method lifted to the graph.

    ``predict(mach, Xt)`` builds a Node; at evaluation time the same object
    runs ``mach.model.predict(mach.fitresult, <value of Xt>)``.

    Operations are pure and stateless, so copies of a network share them.
    """

    def __init__(self, name: str):
        self.name = name
        self.__name__ = name

    def __call__(self, mach: Machine, *args: AbstractNode) -> Node:
        if not isinstance(mach, Machine):
            raise MalformedBlueprintError(
                f"[{self.name}] expected a Machine, got {type(mach).__name__}"
            )
        return Node(self, *args, machine=mach)

    def apply(self, model, fitresult, *values):
        return getattr(model, self.name)(fitresult, *values)

    def __deepcopy__(self, memo):
        return self

    def __repr__(self) -> str:
        return self.name


transform = Operation("transform")
inverse_transform = Operation("inverse_transform")
predict = Operation("predict")
predict_mean = Operation("predict_mean")
predict_mode = Operation("predict_mode")
