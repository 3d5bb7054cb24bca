# learnnet/models/base.py
from __future__ import annotations

"""
Model descriptions (hyper-parameter containers).

A model is a mutable configuration only. Everything learned from data lives
in the (fitresult, cache, report) triple returned by ``fit`` and is owned by
the Machine that trained it, never by the model itself.

Configuration equality is dataclass field equality; two equal models are
still distinct objects, and every graph query dedupes models by identity.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Tuple

DETERMINISTIC = "deterministic"
PROBABILISTIC = "probabilistic"


class Model(ABC):
    """
    Base model description.

    Contract:
    - fit(verbosity, *args) -> (fitresult, cache, report)
    - update(verbosity, fitresult, cache, *args) -> same triple
    """

    # descriptive metadata for the surrounding framework: True for models
    # whose fitresult is itself a trained network. Graph queries ignore it;
    # models() lists wrapper instances like any other model.
    is_wrapper: ClassVar[bool] = False

    @abstractmethod
    def fit(self, verbosity: int, *args) -> Tuple[Any, Any, Any]:
        raise NotImplementedError

    def update(self, verbosity: int, fitresult, cache, *args) -> Tuple[Any, Any, Any]:
        # default: retrain from scratch
        return self.fit(verbosity, *args)

    def clean(self) -> str:
        """
        Repair invalid hyper-parameters in place; return a warning message
        (empty when nothing was changed).
        """
        return ""


class Unsupervised(Model):

    def transform(self, fitresult, X):
        raise NotImplementedError(
            f"{type(self).__name__} does not implement transform"
        )

    def inverse_transform(self, fitresult, X):
        raise NotImplementedError(
            f"{type(self).__name__} does not implement inverse_transform"
        )


class Supervised(Model):
    # explicit capability marker, inspected by the composite factory
    prediction_type: ClassVar[str] = DETERMINISTIC

    @abstractmethod
    def predict(self, fitresult, Xnew):
        raise NotImplementedError


class Deterministic(Supervised):
    """Point-estimate predictor."""

    prediction_type: ClassVar[str] = DETERMINISTIC


class Probabilistic(Supervised):
    """
    Distributional predictor. ``predict`` returns one distribution per row,
    represented as a {value: probability} dict.
    """

    prediction_type: ClassVar[str] = PROBABILISTIC

    def predict_mode(self, fitresult, Xnew):
        return [max(d, key=d.get) for d in self.predict(fitresult, Xnew)]

    def predict_mean(self, fitresult, Xnew):
        return [
            sum(value * p for value, p in d.items())
            for d in self.predict(fitresult, Xnew)
        ]


def is_supervised(model) -> bool:
    return isinstance(model, Supervised)


def is_probabilistic(model) -> bool:
    return getattr(model, "prediction_type", None) == PROBABILISTIC
