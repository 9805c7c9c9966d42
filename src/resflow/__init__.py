from .combinators import (
    TakeWhileSuccess,
    expand_failure,
    expand_success,
    failures,
    fallible_transform_failure,
    fallible_transform_success,
    filter_failure,
    filter_map_failure,
    filter_map_fallible_success,
    filter_map_success,
    filter_success,
    flat_map_failure,
    flat_map_success,
    flatten_failure,
    flatten_failure_iter,
    flatten_success,
    flatten_success_iter,
    log_failures,
    on_failure,
    on_success,
    require_present_or_else,
    successes,
    take_while_success,
    traced,
    transform_failure,
    transform_inner_or_else,
    transform_success,
    try_filter_failure,
    try_filter_map_failure,
    try_filter_map_success,
    try_filter_success,
    try_map_failure,
    try_map_success,
    unwrap_with,
    while_success,
)
from .kernel import (
    Err,
    Evidence,
    FallibleIter,
    Ok,
    Result,
    Trace,
    UnknownOperationError,
    inner_ok_or_else,
)

__all__ = [
    # Core
    "FallibleIter",
    "Ok",
    "Err",
    "Result",
    "inner_ok_or_else",
    "UnknownOperationError",
    # Transforming
    "transform_success",
    "transform_failure",
    "fallible_transform_success",
    "fallible_transform_failure",
    "try_map_success",
    "try_map_failure",
    "flatten_success",
    "flatten_failure",
    # Expansion
    "expand_success",
    "expand_failure",
    "flat_map_success",
    "flat_map_failure",
    "flatten_success_iter",
    "flatten_failure_iter",
    # Filtering
    "filter_success",
    "filter_failure",
    "filter_map_success",
    "filter_map_failure",
    "filter_map_fallible_success",
    "try_filter_success",
    "try_filter_failure",
    "try_filter_map_success",
    "try_filter_map_failure",
    # Nested optional
    "require_present_or_else",
    "transform_inner_or_else",
    # Inspection
    "on_failure",
    "on_success",
    "log_failures",
    "traced",
    # Terminal
    "TakeWhileSuccess",
    "take_while_success",
    "successes",
    "failures",
    "unwrap_with",
    "while_success",
    # Tracing
    "Trace",
    "Evidence",
]
