#!filepath: tests/blueprint/test_fit_method.py
from __future__ import annotations

import threading
from dataclasses import dataclass

import numpy as np

from learnnet import Node, allsources, fit, fit_method, machine, predict, replace, source
from learnnet.models import Deterministic


def test_fit_method_returns_trained_copy(network, X, y):
    train = fit_method(network.yhat)

    fitresult, cache, report = train(None, 0, X, y)

    assert isinstance(fitresult, Node)
    assert fitresult is not network.yhat
    assert cache is None
    assert report is None
    assert fitresult.machine.state == 1
    np.testing.assert_allclose(fitresult(), y, atol=1e-8)


def test_fit_method_binds_new_data(network, X, y):
    train = fit_method(network.yhat)
    X2 = X.iloc[:10].reset_index(drop=True)
    y2 = -y[:10]

    fitresult, _, _ = train(None, 0, X2, y2)

    X_, y_ = allsources(fitresult)
    assert X_.data is X2
    assert y_.data is y2
    np.testing.assert_allclose(fitresult(), y2, atol=1e-8)


def test_blueprint_untouched_by_training(network, X, y):
    train = fit_method(network.yhat)
    train(None, 0, X, y)

    assert network.t.state == 0
    assert network.l.state == 0
    assert network.X.data is X


def test_trained_blueprint_copy_is_retrained(network, X, y):
    fit(network.yhat, verbosity=0)
    train = fit_method(network.yhat)

    fitresult, _, _ = train(None, 0, X, 3 * y)

    assert fitresult.machine.state == 1
    np.testing.assert_allclose(fitresult(), 3 * y, atol=1e-8)
    np.testing.assert_allclose(network.yhat(), y, atol=1e-8)


def test_calls_do_not_share_state(network, X, y):
    train = fit_method(network.yhat)

    r1, _, _ = train(None, 0, X, y)
    r2, _, _ = train(None, 0, X, 2 * y)

    assert r1.machine is not r2.machine
    assert r1.machine.fitresult is not r2.machine.fitresult
    assert r1.args[0].machine is not r2.args[0].machine

    before = r2()
    r1.machine.fitresult.coef_[:] = 0.0

    np.testing.assert_allclose(r2(), before)
    np.testing.assert_allclose(r2(), 2 * y, atol=1e-8)


def test_replace_is_inert(network):
    tape = network.yhat.tape
    s = source(1)

    result = replace(network.yhat, (network.X, s))

    assert result is None
    assert network.yhat.tape == tape
    assert network.yhat.args[0].args[0] is network.X


def test_concurrent_training_keeps_blueprint_data(X, y):
    barrier = threading.Barrier(2, timeout=10)

    @dataclass
    class RendezvousRegressor(Deterministic):
        """Holds each copy until both training calls are copying."""

        def fit(self, verbosity, X, y):
            return float(np.mean(y)), None, None

        def predict(self, fitresult, Xnew):
            return np.full(len(Xnew), fitresult)

        def __deepcopy__(self, memo):
            barrier.wait()
            return RendezvousRegressor()

    Xs, ys = source(X), source(y)
    yhat = predict(machine(RendezvousRegressor(), Xs, ys), Xs)
    train = fit_method(yhat)

    results, errors = {}, []

    def run(key, target):
        try:
            results[key] = train(None, 0, X, target)[0]
        except Exception as exc:  # surfaced by the assertion below
            errors.append(exc)

    threads = [
        threading.Thread(target=run, args=("a", y)),
        threading.Thread(target=run, args=("b", 2 * y)),
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert Xs.data is X
    assert ys.data is y
    np.testing.assert_allclose(results["a"](), np.mean(y))
    np.testing.assert_allclose(results["b"](), 2 * np.mean(y))
