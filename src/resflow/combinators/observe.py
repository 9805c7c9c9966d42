"""Inspection combinators: side effects that leave the items untouched."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from resflow.kernel.iter import FallibleIter
from resflow.kernel.result import Err, Ok, Result, check_result
from resflow.kernel.trace import Trace

T = TypeVar("T")
E = TypeVar("E")

logger = logging.getLogger(__name__)


def on_failure(source: Iterable[Result[T, E]], f: Callable[[E], Any]) -> FallibleIter[T, E]:
    """Call ``f(e)`` for every Err item, then forward it unchanged.

    ``f`` runs exactly once per failure, at the pull that produces it.
    Its return value is ignored.
    """
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                f(item.err_value)
            yield item

    return FallibleIter(_run())


def on_success(source: Iterable[Result[T, E]], f: Callable[[T], Any]) -> FallibleIter[T, E]:
    """Call ``f(v)`` for every Ok item, then forward it unchanged."""
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok):
                f(item.ok_value)
            yield item

    return FallibleIter(_run())


def log_failures(
    source: Iterable[Result[T, E]],
    log: logging.Logger | None = None,
    level: int = logging.WARNING,
    message: str = "failure in sequence: %r",
) -> FallibleIter[T, E]:
    """Log every failure payload, forwarding all items unchanged.

    Args:
        source: Upstream sequence of results.
        log: Logger to write to; defaults to this module's logger.
        level: Logging level for each failure.
        message: %-style format string receiving the failure payload.
    """
    target = log if log is not None else logger

    def _log(error: E) -> None:
        target.log(level, message, error)

    return on_failure(source, _log)


def traced(source: Iterable[Result[T, E]], trace: Trace, label: str = "seq") -> FallibleIter[T, E]:
    """Record one Evidence entry per pulled item into ``trace``.

    Trace behavior:
        - Records a "<label>" root event at the first pull
        - Records "<label>.success" or "<label>.failure" with info={"index": n}
          under that root
        - Records "<label>.end" under the root once upstream is exhausted
        - A disabled trace records nothing

    Items are forwarded unchanged.
    """
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        root_id = trace.record(label)
        for index, item in enumerate(it):
            item = check_result(item)
            kind = "success" if isinstance(item, Ok) else "failure"
            trace.record(f"{label}.{kind}", info={"index": index}, parent_id=root_id)
            yield item
        trace.record(f"{label}.end", parent_id=root_id)

    return FallibleIter(_run())
