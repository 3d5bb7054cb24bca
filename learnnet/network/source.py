# learnnet/network/source.py
from __future__ import annotations

from typing import Any

from learnnet.network.base import AbstractNode


class Source(AbstractNode):
    """
    Leaf of a learning network: a small handle onto externally owned data.

    - identity-significant (no value equality)
    - ``data`` is replaced wholesale; ``None`` is the absent marker
    - calling with a new input returns that input instead of ``data``
    """

    def __init__(self, data: Any = None):
        self.data = data

    def get(self) -> Any:
        return self.data

    def set(self, value: Any) -> None:
        self.data = value

    def __call__(self, *new):
        if new:
            return new[0]
        return self.data

    @property
    def tape(self) -> list:
        return []

    def __repr__(self) -> str:
        return f"Source @{id(self) % 1000:03d}"


def source(value: Any = None) -> Source:
    return Source(value)
