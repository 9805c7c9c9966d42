"""Tests for side-effect and inspection combinators."""

import logging

from resflow import Err, FallibleIter, Ok, Trace, log_failures, on_failure, on_success, traced
from fakes import CountingSource, Recorder, parsed


def test_on_failure_is_transparent() -> None:
    items = parsed(["1", "a", "2", "b"])
    recorder = Recorder()
    assert list(on_failure(items, recorder)) == items
    assert recorder.calls == ["a", "b"]


def test_on_failure_runs_at_pull_time() -> None:
    """Each side effect happens when its item is pulled, not earlier."""
    recorder = Recorder()
    source = CountingSource([Err("a"), Ok(1), Err("b")])
    observed = on_failure(source, recorder)
    assert recorder.calls == []
    next(observed)
    assert recorder.calls == ["a"]
    next(observed)
    assert recorder.calls == ["a"]
    next(observed)
    assert recorder.calls == ["a", "b"]


def test_on_success_mirrors_on_failure() -> None:
    items = parsed(["1", "a", "2"])
    recorder = Recorder()
    assert list(on_success(items, recorder)) == items
    assert recorder.calls == [1, 2]


def test_on_failure_ignores_return_value() -> None:
    out = list(FallibleIter([Err("e")]).on_failure(lambda e: "replaced"))
    assert out == [Err("e")]


def test_log_failures_uses_module_logger(caplog) -> None:
    items = parsed(["1", "oops"])
    with caplog.at_level(logging.WARNING, logger="resflow.combinators.observe"):
        out = list(log_failures(items))
    assert out == items
    assert len(caplog.records) == 1
    assert "oops" in caplog.records[0].getMessage()


def test_log_failures_custom_logger_and_level(caplog) -> None:
    log = logging.getLogger("tests.pipeline")
    with caplog.at_level(logging.DEBUG, logger="tests.pipeline"):
        list(FallibleIter([Err("x"), Ok(1), Err("y")]).log_failures(log, logging.ERROR, "dropped %s"))
    messages = [(r.levelno, r.getMessage()) for r in caplog.records if r.name == "tests.pipeline"]
    assert messages == [(logging.ERROR, "dropped x"), (logging.ERROR, "dropped y")]


def test_traced_records_each_item() -> None:
    trace = Trace()
    items = [Ok(1), Err("e"), Ok(2)]
    assert list(traced(items, trace, label="parse")) == items
    actions = [ev.action for ev in trace.get_events()]
    assert actions == ["parse", "parse.success", "parse.failure", "parse.success", "parse.end"]
    assert [ev.info["index"] for ev in trace.find_all(action="parse.success")] == [0, 2]


def test_traced_nests_items_under_chain_root() -> None:
    """Two chains sharing a trace keep their item events apart."""
    trace = Trace()
    first = traced([Ok(1), Err("e")], trace, label="first")
    second = traced([Ok(2)], trace, label="second")
    assert next(first) == Ok(1)
    assert next(second) == Ok(2)
    list(first)
    list(second)
    assert trace.as_tree() == {None: [0, 2], 0: [1, 4, 5], 2: [3, 6]}
    assert trace.find_all(action="second.end")[0].parent_id == 2


def test_traced_records_nothing_before_first_pull() -> None:
    trace = Trace()
    traced([Ok(1)], trace)
    assert len(trace) == 0


def test_traced_disabled_records_nothing() -> None:
    trace = Trace(enabled=False)
    assert list(FallibleIter([Ok(1)]).traced(trace)) == [Ok(1)]
    assert len(trace) == 0
