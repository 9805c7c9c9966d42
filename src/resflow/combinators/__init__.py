"""Combinators - lazy adaptors over sequences of results.

Every combinator is a free function taking the upstream iterable first.
Importing this package registers each of them on FallibleIter, so they
can also be chained as methods.
"""

from resflow.kernel.iter import FallibleIter

from .expand import (
    expand_failure,
    expand_success,
    flat_map_failure,
    flat_map_success,
    flatten_failure_iter,
    flatten_success_iter,
)
from .filter import (
    filter_failure,
    filter_map_failure,
    filter_map_fallible_success,
    filter_map_success,
    filter_success,
    try_filter_failure,
    try_filter_map_failure,
    try_filter_map_success,
    try_filter_success,
)
from .nested import require_present_or_else, transform_inner_or_else
from .observe import log_failures, on_failure, on_success, traced
from .terminal import (
    TakeWhileSuccess,
    failures,
    successes,
    take_while_success,
    unwrap_with,
    while_success,
)
from .transform import (
    fallible_transform_failure,
    fallible_transform_success,
    flatten_failure,
    flatten_success,
    transform_failure,
    transform_success,
    try_map_failure,
    try_map_success,
)

_OPS = (
    # Transforming
    transform_success,
    transform_failure,
    fallible_transform_success,
    fallible_transform_failure,
    flatten_success,
    flatten_failure,
    # Expansion
    expand_success,
    expand_failure,
    flat_map_success,
    flat_map_failure,
    flatten_success_iter,
    flatten_failure_iter,
    # Filtering
    filter_success,
    filter_failure,
    filter_map_success,
    filter_map_failure,
    filter_map_fallible_success,
    try_filter_success,
    try_filter_failure,
    try_filter_map_success,
    try_filter_map_failure,
    # Nested optional
    require_present_or_else,
    transform_inner_or_else,
    # Inspection
    on_failure,
    on_success,
    log_failures,
    traced,
    # Terminal
    take_while_success,
    successes,
    failures,
    unwrap_with,
    while_success,
)

for _op in _OPS:
    FallibleIter.register_op(_op.__name__, _op)

# Aliases share the function object, so register them under their own names.
FallibleIter.register_op("try_map_success", try_map_success)
FallibleIter.register_op("try_map_failure", try_map_failure)

__all__ = [
    "TakeWhileSuccess",
    "expand_failure",
    "expand_success",
    "fallible_transform_failure",
    "fallible_transform_success",
    "failures",
    "filter_failure",
    "filter_map_failure",
    "filter_map_fallible_success",
    "filter_map_success",
    "filter_success",
    "flat_map_failure",
    "flat_map_success",
    "flatten_failure_iter",
    "flatten_success_iter",
    "flatten_failure",
    "flatten_success",
    "log_failures",
    "on_failure",
    "on_success",
    "require_present_or_else",
    "successes",
    "take_while_success",
    "traced",
    "transform_failure",
    "transform_inner_or_else",
    "transform_success",
    "try_filter_failure",
    "try_filter_map_failure",
    "try_filter_map_success",
    "try_filter_success",
    "try_map_failure",
    "try_map_success",
    "unwrap_with",
    "while_success",
]
