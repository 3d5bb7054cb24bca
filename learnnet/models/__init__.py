from .base import (
    DETERMINISTIC,
    PROBABILISTIC,
    Deterministic,
    Model,
    Probabilistic,
    Supervised,
    Unsupervised,
    is_probabilistic,
    is_supervised,
)
from .builtin import (
    ConstantClassifier,
    ConstantRegressor,
    FeatureSelector,
    LinearRegressor,
    Standardizer,
)

__all__ = [
    "DETERMINISTIC", "PROBABILISTIC",
    "Model", "Supervised", "Unsupervised", "Deterministic", "Probabilistic",
    "is_probabilistic", "is_supervised",
    "ConstantClassifier", "ConstantRegressor", "FeatureSelector",
    "LinearRegressor", "Standardizer",
]
