"""Kernel layer - the wrapper, result helpers and pull tracing."""

from resflow.kernel.iter import FallibleIter, UnknownOperationError
from resflow.kernel.result import Err, Ok, Result, check_result, inner_ok_or_else
from resflow.kernel.trace import Evidence, Trace

__all__ = [
    "FallibleIter",
    "UnknownOperationError",
    # Results
    "Ok",
    "Err",
    "Result",
    "check_result",
    "inner_ok_or_else",
    # Tracing
    "Evidence",
    "Trace",
]
