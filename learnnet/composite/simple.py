# learnnet/composite/simple.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from learnnet.composite.networks import DeterministicNetwork
from learnnet.models.base import Deterministic, Unsupervised
from learnnet.models.builtin import ConstantRegressor, FeatureSelector
from learnnet.network import training
from learnnet.network.machine import machine
from learnnet.network.operations import predict, transform
from learnnet.network.source import source
from learnnet.utils.logger import logs


@dataclass
class SimpleDeterministicCompositeModel(DeterministicNetwork):
    """
    Transformer (Unsupervised) followed by a Deterministic model.

    Mainly for testing; written by hand rather than generated.
    """

    model: Deterministic = field(default_factory=ConstantRegressor)
    transformer: Unsupervised = field(default_factory=FeatureSelector)

    load_path: ClassVar[str] = "learnnet.composite.simple.SimpleDeterministicCompositeModel"

    def __post_init__(self):
        message = self.clean()
        if message:
            logs.warning(message)

    def clean(self) -> str:
        message = ""
        if not isinstance(self.model, Deterministic):
            message += (
                f"model must be Deterministic, got {type(self.model).__name__}; "
                f"using ConstantRegressor(). "
            )
            self.model = ConstantRegressor()
        if not isinstance(self.transformer, Unsupervised):
            message += (
                f"transformer must be Unsupervised, got {type(self.transformer).__name__}; "
                f"using FeatureSelector(). "
            )
            self.transformer = FeatureSelector()
        return message.strip()

    def fit(self, verbosity: int, Xtrain, ytrain):
        X = source(Xtrain)
        y = source(ytrain)

        t = machine(self.transformer, X)
        Xt = transform(t, X)

        l = machine(self.model, Xt, y)
        yhat = predict(l, Xt)

        training.fit(yhat, verbosity=verbosity)
        fitresult = yhat
        report = l.report
        cache = l
        return fitresult, cache, report
