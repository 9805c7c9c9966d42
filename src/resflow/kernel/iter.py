"""FallibleIter - the lazy sequence wrapper every combinator returns."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from result import Result

T = TypeVar("T")
E = TypeVar("E")

logger = logging.getLogger(__name__)


# Extension registry - class-level storage for FallibleIter operations
_extensions_registry: dict[str, Callable[..., Any]] = {}


class UnknownOperationError(AttributeError):
    """Raised when an attribute is neither defined nor a registered operation."""

    def __init__(self, name: str) -> None:
        super().__init__(f"'FallibleIter' object has no attribute or registered operation '{name}'")
        self.name = name


@dataclass(frozen=True)
class FallibleIter(Generic[T, E]):
    """Lazy, single-pass sequence of ``Ok`` / ``Err`` items.

    Wraps any iterable; pulling from the wrapper pulls from the wrapped
    iterator exactly once. Combinators are registered via register_op()
    and become available as methods:

        >>> FallibleIter(items).transform_success(str.upper).on_failure(print)
    """

    _it: Iterator[Result[T, E]] = field(repr=False)

    def __init__(self, source: Iterable[Result[T, E]]) -> None:
        object.__setattr__(self, "_it", iter(source))

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register an operation on the FallibleIter class.

        The operation is called with the wrapper as its first argument.

        Args:
            name: The method name (e.g., "transform_success")
            fn: The function to register

        Raises:
            ValueError: If the name shadows a regular attribute or an
                operation that is already registered.
        """
        if hasattr(cls, name):
            raise ValueError(f"Cannot register '{name}': FallibleIter already defines it")
        if name in _extensions_registry:
            raise ValueError(f"Cannot register '{name}': operation already registered")
        logger.debug("registering FallibleIter operation %s", name)
        _extensions_registry[name] = fn

    @classmethod
    def registered_ops(cls) -> tuple[str, ...]:
        return tuple(sorted(_extensions_registry))

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered extension methods."""
        if name in _extensions_registry:
            fn = _extensions_registry[name]
            # Bind the function to this instance
            return lambda *args, **kwargs: fn(self, *args, **kwargs)
        raise UnknownOperationError(name)

    def __iter__(self) -> FallibleIter[T, E]:
        return self

    def __next__(self) -> Result[T, E]:
        return next(self._it)
