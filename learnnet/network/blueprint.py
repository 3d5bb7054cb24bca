# learnnet/network/blueprint.py
from __future__ import annotations

"""
Blueprints: networks used as templates for training on new data.

Source contract
---------------
A blueprint has exactly two designated sources, in first-encountered order
(``allsources``): features first, target second. The order is positional;
source names or contents are never inspected. With more than two sources
only the first two are stripped and rebound; the others keep their data.
"""

import copy
from typing import Callable

from learnnet.network.node import Node
from learnnet.network.queries import allsources
from learnnet.network.source import Source
from learnnet.network.training import fit, reset
from learnnet.utils.errors import NetworkError
from learnnet.utils.logger import logs


def _feature_target_sources(N):
    sources = allsources(N)
    if len(sources) < 2:
        raise NetworkError(
            f"[blueprint] expected a features source and a target source, "
            f"found {len(sources)} source(s)"
        )
    return sources[0], sources[1]


def stripped_copy(N: Node) -> Node:
    """
    Deep copy of the network at N whose two sources hold no data.

    N itself is never mutated: the copy gets fresh empty sources in place
    of the features and target sources, so concurrent calls on one
    blueprint do not interfere.
    """
    X_source, y_source = _feature_target_sources(N)

    memo = {id(s): Source(None) for s in (X_source, y_source)}
    return copy.deepcopy(N, memo)


def fit_method(N: Node) -> Callable:
    """
    Return a train entry point ``fit(model, verbosity, X, y)`` with N as
    blueprint. Each call trains its own clone of N and returns
    ``(trained_clone, None, None)``.
    """

    def fit_(model, verbosity: int, X, y):
        yhat = stripped_copy(N)

        X_, y_ = _feature_target_sources(yhat)
        X_.data = X
        y_.data = y

        reset(yhat)
        fit(yhat, verbosity=verbosity)

        cache = None
        report = None
        return yhat, cache, report

    fit_.__name__ = "fit"
    return fit_


def replace(N: Node, *pairs):
    """
    Rewrite the network at N, substituting sources and models ``a => b``.

    Declared for API completeness; it has no effect and returns None.
    """
    logs.debug(f"[replace] not implemented; {len(pairs)} pair(s) ignored")
    return None
