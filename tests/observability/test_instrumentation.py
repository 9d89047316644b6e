from phisched.observability.instrumentation import Instrumentation, NoOpInstrumentation
from phisched.observability.metrics import MetricRecorder
from phisched.observability.timer import Timer


def test_timer_basic():
    t = Timer(enabled=True)
    t.start("task")
    elapsed = t.end("task")

    assert elapsed >= 0.0
    # 第二次 end 没有对应 start
    assert t.end("task") == 0.0


def test_timer_disabled():
    t = Timer(enabled=False)
    t.start("task")

    assert t.end("task") == 0.0


def test_metric_recorder():
    m = MetricRecorder()
    m.record("series.span", 9.7)
    m.incr("events.submitted", 3)
    m.incr("events.submitted")

    assert m.metrics == {"series.span": 9.7, "events.submitted": 4}


def test_metric_recorder_disabled():
    m = MetricRecorder(enabled=False)
    m.record("a", 1)
    m.incr("b")

    assert m.metrics == {}


def test_leaf_only_timeline():
    inst = Instrumentation()

    with inst.timer("parent", record=False):
        with inst.timer("leaf"):
            pass

    assert list(inst.timeline) == ["leaf"]


def test_timeline_recorded_even_on_exception():
    inst = Instrumentation()

    try:
        with inst.timer("boom"):
            raise RuntimeError("x")
    except RuntimeError:
        pass

    assert "boom" in inst.timeline


def test_disabled_instrumentation_records_nothing():
    inst = Instrumentation(enabled=False)

    with inst.timer("leaf"):
        pass
    inst.metrics.incr("x")

    assert inst.timeline == {}
    assert inst.metrics.metrics == {}


def test_noop_instrumentation():
    inst = NoOpInstrumentation()

    with inst.timer("anything"):
        pass
    inst.metrics.record("x", 1)

    assert inst.metrics.metrics == {}
