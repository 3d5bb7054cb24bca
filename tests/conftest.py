# tests/conftest.py
from __future__ import annotations

from types import SimpleNamespace

import numpy as np
import pandas as pd
import pytest
from loguru import logger

from learnnet import machine, predict, source, transform
from learnnet.models import LinearRegressor, Standardizer


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def captured_logs():
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="DEBUG")
    yield captured
    logger.remove(sink_id)


@pytest.fixture
def X() -> pd.DataFrame:
    rng = np.random.default_rng(0)
    return pd.DataFrame(
        {
            "a": rng.normal(size=20),
            "b": rng.normal(size=20),
            "c": rng.normal(size=20),
        }
    )


@pytest.fixture
def y(X) -> np.ndarray:
    # exactly linear in the features
    return (2.0 * X["a"] - X["b"] + 0.5).to_numpy()


@pytest.fixture
def network(X, y):
    """
    yhat = predict(machine(LinearRegressor, Xt, y), Xt)
    Xt   = transform(machine(Standardizer, X), X)
    """
    Xs = source(X)
    ys = source(y)

    t = machine(Standardizer(), Xs)
    Xt = transform(t, Xs)

    l = machine(LinearRegressor(), Xt, ys)
    yhat = predict(l, Xt)

    return SimpleNamespace(X=Xs, y=ys, t=t, Xt=Xt, l=l, yhat=yhat)
