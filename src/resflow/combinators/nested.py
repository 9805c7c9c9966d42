"""Combinators for sequences whose success payload is optional (``Ok(v | None)``)."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

from resflow.kernel.iter import FallibleIter
from resflow.kernel.result import Err, Ok, Result, check_result

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


def require_present_or_else(
    source: Iterable[Result[T | None, E]],
    make_error: Callable[[], E],
) -> FallibleIter[T, E]:
    """Turn ``Ok(None)`` into a failure built by ``make_error``.

    Semantics:
        - Ok(v), v not None: yields Ok(v)
        - Ok(None): yields Err(make_error())
        - Err(e): forwarded, make_error is not called

    Args:
        source: Upstream sequence of optional-payload results.
        make_error: Zero-argument error factory, called once per absent item.
    """
    it = iter(source)

    def _run() -> Iterator[Result[T, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Ok) and item.ok_value is None:
                yield Err(make_error())
            else:
                yield item

    return FallibleIter(_run())


def transform_inner_or_else(
    source: Iterable[Result[T | None, E]],
    f: Callable[[T], U],
    make_error: Callable[[], E],
) -> FallibleIter[U, E]:
    """Unwrap as require_present_or_else does, then apply ``f`` to present values."""
    it = iter(source)

    def _run() -> Iterator[Result[U, E]]:
        for item in it:
            item = check_result(item)
            if isinstance(item, Err):
                yield item
            elif item.ok_value is None:
                yield Err(make_error())
            else:
                yield Ok(f(item.ok_value))

    return FallibleIter(_run())
