"""Filtering combinators: drop or replace items on one channel."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from resflow.kernel.iter import FallibleIter
from resflow.kernel.result import Err, Ok, Result, check_result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


def filter_success(source: Iterable[Result[T, E]], predicate: Callable[[T], bool]) -> FallibleIter[T, E]:
    """Keep Ok items whose payload satisfies ``predicate``; Err items always pass."""
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err) or predicate(item.ok_value):
                yield item

    return FallibleIter(_run())


def filter_failure(source: Iterable[Result[T, E]], predicate: Callable[[E], bool]) -> FallibleIter[T, E]:
    """Keep Err items whose payload satisfies ``predicate``; Ok items always pass."""
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok) or predicate(item.err_value):
                yield item

    return FallibleIter(_run())


def filter_map_success(source: Iterable[Result[T, E]], f: Callable[[T], U | None]) -> FallibleIter[U, E]:
    """Map success payloads through ``f``, dropping the ones it maps to None.

    Semantics:
        - f(v) is u: yields Ok(u)
        - f(v) is None: the item is skipped and the next upstream item pulled
        - Err(e) is always forwarded unfiltered

    Relative order of the retained items is preserved.
    """
    it = iter(source)

    def _run() -> Iterator[Result[U, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                yield item
                continue
            mapped = f(item.ok_value)
            if mapped is not None:
                yield Ok(mapped)

    return FallibleIter(_run())


def filter_map_failure(source: Iterable[Result[T, E]], f: Callable[[E], F | None]) -> FallibleIter[T, F]:
    """Map failure payloads through ``f``, dropping the ones it maps to None."""
    it = iter(source)

    def _run() -> Iterator[Result[T, F]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok):
                yield item
                continue
            mapped = f(item.err_value)
            if mapped is not None:
                yield Err(mapped)

    return FallibleIter(_run())


def filter_map_fallible_success(
    source: Iterable[Result[T, E]],
    f: Callable[[T], Result[U, E] | None],
) -> FallibleIter[U, E]:
    """Map success payloads to an optional result; None skips, a result is yielded as is."""
    it = iter(source)

    def _run() -> Iterator[Result[U, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                yield item
                continue
            mapped = f(item.ok_value)
            if mapped is not None:
                yield check_result(mapped)

    return FallibleIter(_run())


def try_filter_success(
    source: Iterable[Result[T, E]],
    f: Callable[[T], Result[bool, E]],
) -> FallibleIter[T, E]:
    """Filter Ok items with a fallible decision.

    Semantics:
        - Ok(True): the item is kept unchanged
        - Ok(False): the item is skipped
        - Err(x): Err(x) replaces the item; iteration continues afterwards
        - Err items from upstream are forwarded without calling ``f``
    """
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                yield item
                continue
            decision = check_result(f(item.ok_value))
            if isinstance(decision, Err):
                yield decision
            elif decision.ok_value:
                yield item

    return FallibleIter(_run())


def try_filter_failure(
    source: Iterable[Result[T, E]],
    f: Callable[[E], Result[bool, E]],
) -> FallibleIter[T, E]:
    """Filter Err items with a fallible decision; Ok items are forwarded."""
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok):
                yield item
                continue
            decision = check_result(f(item.err_value))
            if isinstance(decision, Err):
                yield decision
            elif decision.ok_value:
                yield item

    return FallibleIter(_run())


def try_filter_map_success(
    source: Iterable[Result[T, E]],
    f: Callable[[T], Result[U | None, E]],
) -> FallibleIter[U, E]:
    """Fallible filter_map over success payloads.

    Semantics:
        - Err(x) from f: yields Err(x)
        - Ok(u) from f: yields Ok(u)
        - Ok(None) from f: the item is skipped
    """
    it = iter(source)

    def _run() -> Iterator[Result[U, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                yield item
                continue
            mapped = check_result(f(item.ok_value))
            if isinstance(mapped, Err) or mapped.ok_value is not None:
                yield mapped

    return FallibleIter(_run())


def try_filter_map_failure(
    source: Iterable[Result[T, E]],
    f: Callable[[E], Result[T | None, E]],
) -> FallibleIter[T, E]:
    """Fallible filter_map over failure payloads.

    The result of ``f`` is yielded as is, so Ok(u) recovers the item as a
    success; Ok(None) skips the item; Err(x) from ``f`` yields Err(x).
    """
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok):
                yield item
                continue
            mapped = check_result(f(item.err_value))
            if isinstance(mapped, Err) or mapped.ok_value is not None:
                yield mapped

    return FallibleIter(_run())
