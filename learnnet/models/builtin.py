# learnnet/models/builtin.py
from __future__ import annotations

"""
Small reference models used to compose and test learning networks.

Inputs:
- X : pandas.DataFrame (feature table)
- y : array-like target
"""

from dataclasses import dataclass, field
from typing import List

import numpy as np
import pandas as pd
from sklearn.linear_model import LinearRegression
from sklearn.preprocessing import StandardScaler

from learnnet.models.base import Deterministic, Probabilistic, Unsupervised


@dataclass
class FeatureSelector(Unsupervised):
    """
    Keep ``features`` (all columns when empty), in the given order.
    """

    features: List[str] = field(default_factory=list)

    def fit(self, verbosity: int, X: pd.DataFrame):
        selected = list(self.features) if self.features else list(X.columns)
        missing = [c for c in selected if c not in X.columns]
        if missing:
            raise KeyError(f"[FeatureSelector] unknown features: {missing}")
        return selected, None, {"features_to_keep": selected}

    def transform(self, fitresult, X: pd.DataFrame) -> pd.DataFrame:
        return X[fitresult]


@dataclass
class Standardizer(Unsupervised):
    with_mean: bool = True
    with_std: bool = True

    def fit(self, verbosity: int, X: pd.DataFrame):
        columns = list(X.columns)
        scaler = StandardScaler(with_mean=self.with_mean, with_std=self.with_std)
        scaler.fit(X[columns].to_numpy(dtype=float))
        return (scaler, columns), None, {"n_features": len(columns)}

    def transform(self, fitresult, X: pd.DataFrame) -> pd.DataFrame:
        scaler, columns = fitresult
        values = scaler.transform(X[columns].to_numpy(dtype=float))
        return pd.DataFrame(values, columns=columns, index=X.index)

    def inverse_transform(self, fitresult, X: pd.DataFrame) -> pd.DataFrame:
        scaler, columns = fitresult
        values = scaler.inverse_transform(X[columns].to_numpy(dtype=float))
        return pd.DataFrame(values, columns=columns, index=X.index)


@dataclass
class ConstantRegressor(Deterministic):
    """Predicts the training-target mean for every row."""

    def fit(self, verbosity: int, X, y):
        mean = float(np.mean(np.asarray(y, dtype=float)))
        return mean, None, {"mean": mean}

    def predict(self, fitresult, Xnew) -> np.ndarray:
        return np.full(len(Xnew), fitresult, dtype=float)


@dataclass
class LinearRegressor(Deterministic):
    fit_intercept: bool = True

    def fit(self, verbosity: int, X, y):
        model = LinearRegression(fit_intercept=self.fit_intercept)
        model.fit(np.asarray(X, dtype=float), np.asarray(y, dtype=float))
        report = {
            "coef": model.coef_.tolist(),
            "intercept": float(model.intercept_),
        }
        return model, None, report

    def predict(self, fitresult, Xnew) -> np.ndarray:
        return fitresult.predict(np.asarray(Xnew, dtype=float))


@dataclass
class ConstantClassifier(Probabilistic):
    """Predicts the training class frequencies for every row."""

    def fit(self, verbosity: int, X, y):
        freq = pd.Series(np.asarray(y)).value_counts(normalize=True, sort=False)
        dist = {k: float(v) for k, v in freq.items()}
        return dist, None, {"classes": list(dist)}

    def predict(self, fitresult, Xnew):
        return [dict(fitresult) for _ in range(len(Xnew))]
