# learnnet/network/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, List


def unique(items: Iterable[Any]) -> List[Any]:
    """
    Deduplicate by object identity, keeping first-encountered order.

    Models are mutable (unhashable) and two equal models may be distinct
    components, so value equality is never used here.
    """
    seen = set()
    out = []
    for item in items:
        key = id(item)
        if key in seen:
            continue
        seen.add(key)
        out.append(item)
    return out


class AbstractNode(ABC):
    """
    Anything that can appear as an argument in a learning network.
    """

    @abstractmethod
    def __call__(self, *new):
        ...

    @property
    @abstractmethod
    def tape(self) -> list:
        ...
