#!filepath: learnnet/__init__.py

from .utils.logger import Logging, init_logging, logs
from .config import AppConfig, get_config
from .network import *  # noqa: F401,F403
from .network import __all__ as _network_all
from .composite import (
    DeterministicNetwork,
    ProbabilisticNetwork,
    SimpleDeterministicCompositeModel,
    SupervisedNetwork,
    composite,
    get_composite,
    registered_composites,
)

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig", "get_config",
    *_network_all,
    "composite", "get_composite", "registered_composites",
    "SupervisedNetwork", "DeterministicNetwork", "ProbabilisticNetwork",
    "SimpleDeterministicCompositeModel",
]
