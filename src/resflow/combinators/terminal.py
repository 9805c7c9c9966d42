"""Short-circuiting adaptors and terminal consumers that unwrap results."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from resflow.kernel.result import Err, Ok, Result, check_result

T = TypeVar("T")
E = TypeVar("E")

logger = logging.getLogger(__name__)


class TakeWhileSuccess(Generic[T, E]):
    """Yield unwrapped success payloads until the first failure.

    Two states, active and terminated. The first Err moves the adaptor to
    terminated; that item is consumed rather than yielded and is kept on
    ``failure``. A terminated adaptor never pulls upstream again.

    Attributes:
        failure: Payload of the failure that terminated the adaptor, or None.
        terminated: True once a failure has been seen.
    """

    def __init__(self, source: Iterable[Result[T, E]]) -> None:
        self._it = iter(source)
        self.failure: E | None = None
        self.terminated = False

    def __iter__(self) -> TakeWhileSuccess[T, E]:
        return self

    def __next__(self) -> T:
        if self.terminated:
            raise StopIteration
        item = check_result(next(self._it))
        if isinstance(item, Ok):
            return item.ok_value
        self.terminated = True
        self.failure = item.err_value
        logger.debug("take_while_success terminated on failure %r", item.err_value)
        raise StopIteration


def take_while_success(source: Iterable[Result[T, E]]) -> TakeWhileSuccess[T, E]:
    """Yield success payloads up to (not including) the first failure."""
    return TakeWhileSuccess(source)


def successes(source: Iterable[Result[T, E]]) -> Iterator[T]:
    """Yield the payload of every Ok item, dropping Err items."""
    it = iter(source)

    def _run() -> Iterator[T]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok):
                yield item.ok_value

    return _run()


def failures(source: Iterable[Result[T, E]]) -> Iterator[E]:
    """Yield the payload of every Err item, dropping Ok items."""
    it = iter(source)

    def _run() -> Iterator[E]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                yield item.err_value

    return _run()


def unwrap_with(source: Iterable[Result[T, E]], f: Callable[[E], T | None]) -> Iterator[T]:
    """Yield success payloads, substituting ``f(e)`` for failures.

    A failure for which ``f`` returns None is skipped.
    """
    it = iter(source)

    def _run() -> Iterator[T]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok):
                yield item.ok_value
                continue
            replacement = f(item.err_value)
            if replacement is not None:
                yield replacement

    return _run()


def while_success(source: Iterable[Result[T, E]], f: Callable[[T], Any]) -> Result[None, E]:
    """Drive the sequence, calling ``f`` on each success until the first failure.

    Returns:
        Err(e) for the first failure seen (nothing after it is pulled),
        or Ok(None) when the sequence ends without one.
    """
    for item in source:
        item = check_result(item)
        if isinstance(item, Err):
            return item
        f(item.ok_value)
    return Ok(None)
