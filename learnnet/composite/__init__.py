from .factory import composite, get_composite, registered_composites
from .networks import DeterministicNetwork, ProbabilisticNetwork, SupervisedNetwork
from .simple import SimpleDeterministicCompositeModel

__all__ = [
    "composite", "get_composite", "registered_composites",
    "SupervisedNetwork", "DeterministicNetwork", "ProbabilisticNetwork",
    "SimpleDeterministicCompositeModel",
]
