#!filepath: tests/network/test_graph.py
from __future__ import annotations

import operator

import numpy as np
import pytest

from learnnet import Machine, Node, fit, machine, node, predict, source
from learnnet.models import ConstantRegressor
from learnnet.utils.errors import MalformedBlueprintError, NotTrainedError


def test_source_get_set():
    s = source(1)
    assert s.get() == 1

    s.set(None)
    assert s.get() is None

    s.set([1, 2])
    assert s() == [1, 2]


def test_source_called_with_new_input_returns_it():
    s = source("old")
    assert s("new") == "new"
    assert s.get() == "old"


def test_sources_compare_by_identity():
    assert source(1) != source(1)


def test_stateless_node_combines_arguments():
    n = node(operator.add, source(1), source(2))
    assert n() == 3
    assert n.machine is None
    assert n.tape == []


def test_nested_stateless_nodes():
    a = source(2)
    double = node(lambda v: 2 * v, a)
    total = node(operator.add, double, a)
    assert total() == 6

    a.set(5)
    assert total() == 15


def test_node_rejects_non_node_arguments():
    with pytest.raises(MalformedBlueprintError):
        node(operator.add, source(1), 2)


def test_node_rejects_non_callable_operation():
    with pytest.raises(MalformedBlueprintError):
        Node("predict", source(1))


def test_operation_requires_machine():
    with pytest.raises(MalformedBlueprintError, match="expected a Machine"):
        predict(source(1), source(2))


def test_machine_rejects_raw_data():
    with pytest.raises(MalformedBlueprintError):
        machine(ConstantRegressor(), [1.0, 2.0])


def test_new_machine_is_untrained(network):
    mach = network.l
    assert isinstance(mach, Machine)
    assert mach.state == 0
    assert mach.fitresult is None
    assert mach.cache is None
    assert mach.report is None


def test_evaluating_untrained_machine_raises(network):
    with pytest.raises(NotTrainedError):
        network.yhat()


def test_tape_is_deduplicated_and_dependency_ordered(network):
    tape = network.yhat.tape

    assert len(tape) == 2
    assert tape[0] is network.t
    assert tape[1] is network.l


def test_fit_then_evaluate(network, y):
    fit(network.yhat, verbosity=0)

    np.testing.assert_allclose(network.yhat(), y, atol=1e-8)
    np.testing.assert_allclose(network.yhat.evaluate(), y, atol=1e-8)


def test_call_with_new_features(network, X, y):
    fit(network.yhat, verbosity=0)

    preds = network.yhat(X.iloc[:5])

    assert preds.shape == (5,)
    np.testing.assert_allclose(preds, y[:5], atol=1e-8)


def test_shared_machine_trains_once(network):
    p1 = predict(network.l, network.Xt)
    p2 = predict(network.l, network.Xt)
    both = node(operator.add, p1, p2)

    assert len(both.tape) == 2

    fit(both, verbosity=0)

    assert network.t.state == 1
    assert network.l.state == 1


def test_machine_train_updates_when_already_trained(network):
    fit(network.yhat, verbosity=0)
    network.l.train(0)

    assert network.l.state == 2
    assert network.l.report["coef"] is not None


def test_node_fit_method_returns_node(network):
    assert network.yhat.fit(verbosity=0) is network.yhat
    assert network.l.is_trained


def test_node_builds_machine_from_training_args(X, y):
    Xs, ys = source(X), source(y)

    yhat = node(predict, Xs, model=ConstantRegressor(), training_args=[Xs, ys])

    assert isinstance(yhat.machine, Machine)
    assert yhat.machine.args == (Xs, ys)
    fit(yhat, verbosity=0)
    np.testing.assert_allclose(yhat(), np.mean(y))


def test_node_training_args_require_a_model():
    Xs = source([1.0])

    with pytest.raises(MalformedBlueprintError, match="without a model"):
        node(predict, Xs, training_args=[Xs])


def test_node_rejects_machine_and_model_together():
    Xs = source([1.0])
    mach = machine(ConstantRegressor(), Xs, Xs)

    with pytest.raises(MalformedBlueprintError, match="not both"):
        node(predict, Xs, machine=mach, model=ConstantRegressor())
