# learnnet/network/codec.py
from __future__ import annotations

"""
Tree codec: learning network <-> nested record.

Record shapes
-------------
Source:
    {"source": <Source>}

Node (``tree``):
    {"operation": op, "model": model | None,
     "arg1": ..., "arg2": ...,                # ordinary arguments
     "train_arg1": ..., "train_arg2": ...}    # only when a machine is bound

Node (``tree2``):
    {"operation": op, "model": model | None,
     "args": [...], "train_args": [...]}

A node reachable along several paths is encoded once; every occurrence
refers to the same record object. ``reconstruct`` keys its memo on record
identity, so shared structure (and a shared machine) stays shared in the
rebuilt network.
"""

import re
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional

from learnnet.network.machine import Machine
from learnnet.network.node import Node
from learnnet.network.source import Source
from learnnet.utils.errors import MalformedBlueprintError

_ARG_KEY = re.compile(r"^arg[0-9]+$")
_TRAIN_ARG_KEY = re.compile(r"^train_arg[0-9]+$")
_DONE = object()


# ============================================================
# encode
# ============================================================
def tree(N, _memo: Optional[Dict[int, dict]] = None) -> dict:
    """
    Return a tree-like summary of the learning network terminating at N.
    """
    if isinstance(N, Source):
        return {"source": N}
    if not isinstance(N, Node):
        raise MalformedBlueprintError(
            f"{type(N).__name__} given where Node was expected."
        )

    memo = {} if _memo is None else _memo
    if id(N) in memo:
        return memo[id(N)]

    mach = N.machine
    record: Dict[str, Any] = {
        "operation": N.operation,
        "model": mach.model if mach is not None else None,
    }
    for i, arg in enumerate(N.args, 1):
        record[f"arg{i}"] = tree(arg, memo)
    if mach is not None:
        for i, arg in enumerate(mach.args, 1):
            record[f"train_arg{i}"] = tree(arg, memo)

    memo[id(N)] = record
    return record


def tree2(N, _memo: Optional[Dict[int, dict]] = None) -> dict:
    """
    Like ``tree`` but with arguments grouped in two lists.
    """
    if isinstance(N, Source):
        return {"source": N}
    if not isinstance(N, Node):
        raise MalformedBlueprintError(
            f"{type(N).__name__} given where Node was expected."
        )

    memo = {} if _memo is None else _memo
    if id(N) in memo:
        return memo[id(N)]

    mach = N.machine
    record = {
        "operation": N.operation,
        "model": mach.model if mach is not None else None,
        "args": [tree2(arg, memo) for arg in N.args],
        "train_args": (
            [tree2(arg, memo) for arg in mach.args] if mach is not None else []
        ),
    }

    memo[id(N)] = record
    return record


# ============================================================
# record accessors
# ============================================================
def args(record: Mapping) -> List[dict]:
    """Top-level ordinary-argument records, in order."""
    if "args" in record:
        return list(record["args"])
    return [record[k] for k in record if _ARG_KEY.match(str(k))]


def train_args(record: Mapping) -> List[dict]:
    """Top-level training-argument records, in order."""
    if "train_args" in record:
        return list(record["train_args"])
    return [record[k] for k in record if _TRAIN_ARG_KEY.match(str(k))]


def flat_values(record: Mapping) -> Iterator[Any]:
    """
    Depth-first leaf values of a record (either shape).

    A record object shared by several parents is walked once.
    """
    seen = set()
    stack = [iter(record.values())]

    while stack:
        value = next(stack[-1], _DONE)
        if value is _DONE:
            stack.pop()
            continue

        if isinstance(value, Mapping):
            if id(value) not in seen:
                seen.add(id(value))
                stack.append(iter(value.values()))
        elif isinstance(value, list):
            stack.append(iter(value))
        else:
            yield value


# ============================================================
# decode
# ============================================================
def reconstruct(record: Mapping, _memo: Optional[Dict[int, Any]] = None):
    """
    Rebuild a learning network from its tree representation.

    Sources come back as the very same objects; machines are new and
    untrained.
    """
    if not isinstance(record, Mapping):
        raise MalformedBlueprintError(
            f"{type(record).__name__} given where a tree record was expected."
        )

    if len(record) == 1:
        (value,) = record.values()
        if not isinstance(value, Source):
            raise MalformedBlueprintError(
                f"single-field record must hold a Source, got {type(value).__name__}"
            )
        return value

    if "operation" not in record or "model" not in record:
        raise MalformedBlueprintError(
            f"record is missing 'operation'/'model' fields: {list(record)}"
        )

    memo = {} if _memo is None else _memo
    if id(record) in memo:
        return memo[id(record)]

    operation, model = record["operation"], record["model"]
    node_args = [reconstruct(a, memo) for a in args(record)]

    if model is None:
        rebuilt = Node(operation, *node_args)
    else:
        mach = Machine(model, *[reconstruct(a, memo) for a in train_args(record)])
        rebuilt = Node(operation, *node_args, machine=mach)

    memo[id(record)] = rebuilt
    return rebuilt
