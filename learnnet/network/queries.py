# learnnet/network/queries.py
from __future__ import annotations

from typing import List

from learnnet.models.base import Model
from learnnet.network.base import AbstractNode, unique
from learnnet.network.codec import flat_values, tree
from learnnet.network.source import Source


def models(N: AbstractNode) -> List[Model]:
    """
    All models referenced by N, each exactly once, in first-encountered
    order (training-argument branches included).
    """
    return unique(v for v in flat_values(tree(N)) if isinstance(v, Model))


def allsources(N: AbstractNode) -> List[Source]:
    """
    All sources referenced by ``N()`` and ``fit(N)``, each exactly once,
    in first-encountered order.
    """
    return unique(v for v in flat_values(tree(N)) if isinstance(v, Source))
