"""Transforming combinators: map either channel, plainly or fallibly, and flatten."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from resflow.kernel.iter import FallibleIter
from resflow.kernel.result import Err, Ok, Result, check_result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


def transform_success(source: Iterable[Result[T, E]], f: Callable[[T], U]) -> FallibleIter[U, E]:
    """Apply ``f`` to every success payload.

    Semantics:
        - Ok(v) becomes Ok(f(v))
        - Err(e) is forwarded unchanged
        - One upstream pull per outward pull, regardless of variant

    Args:
        source: Upstream sequence of results.
        f: Total function over success payloads.

    Returns:
        FallibleIter[U, E]: The mapped sequence.
    """
    it = iter(source)

    def _run() -> Iterator[Result[U, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok):
                yield Ok(f(item.ok_value))
            else:
                yield item

    return FallibleIter(_run())


def transform_failure(source: Iterable[Result[T, E]], f: Callable[[E], F]) -> FallibleIter[T, F]:
    """Apply ``f`` to every failure payload; successes pass through."""
    it = iter(source)

    def _run() -> Iterator[Result[T, F]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                yield Err(f(item.err_value))
            else:
                yield item

    return FallibleIter(_run())


def fallible_transform_success(
    source: Iterable[Result[T, E]],
    f: Callable[[T], Result[U, E]],
) -> FallibleIter[U, E]:
    """Apply a result-returning ``f`` to every success payload.

    The result of ``f`` becomes the outward item, so no nested
    ``Ok(Err(...))`` ever escapes. ``f`` is never called for Err items.
    """
    it = iter(source)

    def _run() -> Iterator[Result[U, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok):
                yield check_result(f(item.ok_value))
            else:
                yield item

    return FallibleIter(_run())


def fallible_transform_failure(
    source: Iterable[Result[T, E]],
    f: Callable[[E], Result[T, F]],
) -> FallibleIter[T, F]:
    """Apply a result-returning ``f`` to every failure payload.

    Returning Ok from ``f`` recovers the item; Ok items are never passed to it.
    """
    it = iter(source)

    def _run() -> Iterator[Result[T, F]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                yield check_result(f(item.err_value))
            else:
                yield item

    return FallibleIter(_run())


# Aliases kept for API symmetry with the try_filter* family; they must not diverge.
try_map_success = fallible_transform_success
try_map_failure = fallible_transform_failure


def flatten_success(source: Iterable[Result[Result[T, E], E]]) -> FallibleIter[T, E]:
    """Collapse ``Ok(Ok(v))`` to ``Ok(v)`` and ``Ok(Err(e))`` to ``Err(e)``."""
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok):
                yield check_result(item.ok_value)
            else:
                yield item

    return FallibleIter(_run())


def flatten_failure(source: Iterable[Result[T, Result[T, E]]]) -> FallibleIter[T, E]:
    """Collapse ``Err(Ok(v))`` to ``Ok(v)`` and ``Err(Err(e))`` to ``Err(e)``."""
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                yield check_result(item.err_value)
            else:
                yield item

    return FallibleIter(_run())
