#!filepath: tests/observability/test_instrumentation.py

import time

from learnnet.observability import Instrumentation, NoOpInstrumentation


def test_instrumentation_timer():
    inst = Instrumentation(enabled=True)

    with inst.timer("step_A"):
        time.sleep(0.01)

    assert "step_A" in inst.timeline
    assert inst.timeline["step_A"] > 0


def test_parent_scope_not_recorded():
    inst = Instrumentation(enabled=True)

    with inst.timer("parent", record=False):
        with inst.timer("leaf"):
            pass

    assert list(inst.timeline) == ["leaf"]


def test_disabled_instrumentation_records_nothing():
    inst = Instrumentation(enabled=False)

    with inst.timer("x"):
        pass

    assert inst.timeline == {}
    assert inst.total() == 0.0


def test_noop_instrumentation():
    inst = NoOpInstrumentation()

    with inst.timer("x"):
        pass

    assert inst.total() == 0.0


def test_noop_timelines_are_per_instance():
    a, b = NoOpInstrumentation(), NoOpInstrumentation()
    a.timeline["x"] = 1.0

    assert b.timeline == {}
