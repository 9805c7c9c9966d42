"""Result primitives shared by every combinator.

Success and failure values are the ``Ok`` / ``Err`` variants of the
``result`` distribution. This module only adds the small helpers the
adaptors need to dispatch on them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")


def check_result(item: Any) -> Result[Any, Any]:
    """Return ``item`` unchanged if it is an ``Ok`` or ``Err``.

    Raises:
        TypeError: If the upstream produced anything else.
    """
    if isinstance(item, (Ok, Err)):
        return item
    raise TypeError(f"expected Ok or Err, got {type(item).__name__}: {item!r}")


def inner_ok_or_else(result: Result[T | None, E], make_error: Callable[[], E]) -> Result[T, E]:
    """Unwrap an optional success payload, turning ``None`` into a failure.

    ``make_error`` is only called for ``Ok(None)``.
    """
    result = check_result(result)
    if isinstance(result, Err):
        return result
    if result.ok_value is None:
        return Err(make_error())
    return result
