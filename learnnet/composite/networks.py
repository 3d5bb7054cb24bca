# learnnet/composite/networks.py
from __future__ import annotations

from learnnet.models.base import Deterministic, Probabilistic, Supervised
from learnnet.network import training


class SupervisedNetwork(Supervised):
    """
    Model whose fitresult is a trained learning network (a Node).
    """

    is_wrapper = True

    def update(self, verbosity: int, fitresult, cache, *args):
        training.fit(fitresult, verbosity=verbosity)
        return fitresult, cache, None

    def predict(self, fitresult, Xnew):
        return fitresult(Xnew)


class DeterministicNetwork(SupervisedNetwork, Deterministic):
    pass


class ProbabilisticNetwork(SupervisedNetwork, Probabilistic):
    pass
