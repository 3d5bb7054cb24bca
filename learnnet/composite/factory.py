# learnnet/composite/factory.py
from __future__ import annotations

"""
Composite model factory.

Promotes a learning network (blueprint) to a stand-alone model type:

    composite("WrappedRegressor", ["regressor", "transformer"], yhat)

- the new type subclasses DeterministicNetwork or ProbabilisticNetwork,
  chosen from the prediction_type of the first model in the blueprint
- its ``fit`` is ``fit_method(yhat)``: every training call clones the
  blueprint, binds the clone to the new data and trains it
- one field per name; defaults are deep copies of the blueprint's models

Generated types are registered by name (latest definition wins).

The surrounding framework attaches load paths and type-compatibility
metadata; nothing here computes or validates them.
"""

import copy
from dataclasses import field, make_dataclass
from functools import partial
from typing import Any, Dict, Iterable, Optional, Type

from learnnet.composite.networks import (
    DeterministicNetwork,
    ProbabilisticNetwork,
    SupervisedNetwork,
)
from learnnet.models.base import is_probabilistic, is_supervised
from learnnet.network.blueprint import fit_method, stripped_copy
from learnnet.network.node import Node
from learnnet.network.queries import models
from learnnet.utils.errors import MalformedBlueprintError
from learnnet.utils.logger import logs

_COMPOSITE_REGISTRY: Dict[str, Type[SupervisedNetwork]] = {}


def composite(name: str, fieldnames: Iterable[str], N) -> Optional[SupervisedNetwork]:
    """
    Generate and register the model type ``name`` from blueprint N.

    Returns a default-constructed instance, or None (with a warning) when
    the first model of N is not supervised.
    """
    if not isinstance(N, Node):
        raise MalformedBlueprintError(
            f"{type(N).__name__} given where Node was expected."
        )
    if not name.isidentifier():
        raise ValueError(f"[composite] invalid type name: {name!r}")

    fieldnames = list(fieldnames)
    for fname in fieldnames:
        if not fname.isidentifier():
            raise ValueError(f"[composite] invalid field name: {fname!r}")

    components = models(N)
    if not components or not is_supervised(components[0]):
        first = type(components[0]).__name__ if components else None
        logs.warning(
            f"[composite] {name}: first model {first} is not supervised. Did nothing."
        )
        return None

    base = ProbabilisticNetwork if is_probabilistic(components[0]) else DeterministicNetwork

    defaults = models(stripped_copy(N))
    if len(defaults) != len(fieldnames):
        raise ValueError(
            f"[composite] {name}: {len(fieldnames)} field name(s) given "
            f"for {len(defaults)} component model(s)"
        )

    fields = [
        (fname, Any, field(default_factory=partial(copy.deepcopy, default)))
        for fname, default in zip(fieldnames, defaults)
    ]

    cls = make_dataclass(
        name,
        fields,
        bases=(base,),
        namespace={"fit": fit_method(N)},
    )
    cls.__module__ = __name__

    if name in _COMPOSITE_REGISTRY:
        logs.warning(f"[composite] redefining {name}")
    _COMPOSITE_REGISTRY[name] = cls

    logs.info(f"[composite] {name} <: {base.__name__} fields={fieldnames}")
    return cls()


def get_composite(name: str) -> Type[SupervisedNetwork]:
    if name not in _COMPOSITE_REGISTRY:
        available = ", ".join(_COMPOSITE_REGISTRY) or "<none>"
        raise KeyError(f"No composite model {name!r}. Available: {available}")
    return _COMPOSITE_REGISTRY[name]


def registered_composites() -> Dict[str, Type[SupervisedNetwork]]:
    return dict(_COMPOSITE_REGISTRY)
