"""Expansion combinators: replace one item with zero or more items."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from resflow.kernel.iter import FallibleIter
from resflow.kernel.result import Err, Ok, Result, check_result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


def expand_success(
    source: Iterable[Result[T, E]],
    f: Callable[[T], Iterable[Result[U, E]]],
) -> FallibleIter[U, E]:
    """Expand every success payload into a secondary sequence of results.

    Semantics:
        - Ok(v): f(v) is drained one item per outward pull, in its own order,
          before upstream is consulted again
        - Err(e): yielded once, no expansion
        - An empty expansion contributes nothing; the next upstream item is pulled

    Args:
        source: Upstream sequence of results.
        f: Maps a success payload to an iterable of results.

    Returns:
        FallibleIter[U, E]: The flattened sequence.
    """
    it = iter(source)

    def _run() -> Iterator[Result[U, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok):
                for inner in f(item.ok_value):
                    yield check_result(inner)
            else:
                yield item

    return FallibleIter(_run())


def expand_failure(
    source: Iterable[Result[T, E]],
    f: Callable[[E], Iterable[Result[T, F]]],
) -> FallibleIter[T, F]:
    """Expand every failure payload into a secondary sequence; successes pass through."""
    it = iter(source)

    def _run() -> Iterator[Result[T, F]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                for inner in f(item.err_value):
                    yield check_result(inner)
            else:
                yield item

    return FallibleIter(_run())


def flat_map_success(source: Iterable[Result[T, E]], f: Callable[[T], Iterable[U]]) -> FallibleIter[U, E]:
    """Like expand_success, but ``f`` yields plain payloads that are wrapped in Ok."""
    it = iter(source)

    def _run() -> Iterator[Result[U, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok):
                for value in f(item.ok_value):
                    yield Ok(value)
            else:
                yield item

    return FallibleIter(_run())


def flat_map_failure(source: Iterable[Result[T, E]], f: Callable[[E], Iterable[F]]) -> FallibleIter[T, F]:
    """Like expand_failure, but ``f`` yields plain payloads that are wrapped in Err."""
    it = iter(source)

    def _run() -> Iterator[Result[T, F]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                for error in f(item.err_value):
                    yield Err(error)
            else:
                yield item

    return FallibleIter(_run())


def flatten_success_iter(source: Iterable[Result[Iterable[T], E]]) -> FallibleIter[T, E]:
    """Yield each value of an iterable success payload as its own Ok.

    ``Ok([1, 2])`` becomes ``Ok(1), Ok(2)``; flat_map_success with identity.
    """
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok):
                for value in item.ok_value:
                    yield Ok(value)
            else:
                yield item

    return FallibleIter(_run())


def flatten_failure_iter(source: Iterable[Result[T, Iterable[E]]]) -> FallibleIter[T, E]:
    """Yield each value of an iterable failure payload as its own Err."""
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                for error in item.err_value:
                    yield Err(error)
            else:
                yield item

    return FallibleIter(_run())
