"""
resultex — Result containers and structured business errors for Python.

Capture an operation that may raise as a value, transform it, and decide at
the end how to handle a failure:

    from resultex import BusinessError, Result, run_catching

    def quadratic(x: int, a: str, b: str, c: str) -> Result[int]:
        return (
            run_catching(lambda: int(a) * x * x)
            .map_catching(lambda acc: acc + int(b) * x)
            .map_catching(lambda acc: acc + int(c))
        )

    quadratic(1, "1", "2", "3")    # → Success(6)
    quadratic(1, "1", "2.2", "3")  # → Failure(ValueError: ... '2.2')
"""

from resultex.result import Result, Success, Failure, run_catching, catching
from resultex.errors import BusinessError, full_stack_trace, stack_depth
from resultex.execution import (
    ExecutionContext,
    NoOpExecutionContext,
    LoggingExecutionContext,
    ComposableExecutionContext,
    with_context,
)
from resultex.config import ResultexSettings
from resultex.logs import configure_structlog, configure_from_settings
from resultex.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "run_catching",
    "catching",
    "BusinessError",
    "full_stack_trace",
    "stack_depth",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ComposableExecutionContext",
    "with_context",
    "ResultexSettings",
    "configure_structlog",
    "configure_from_settings",
    "ResultAssertions",
]

__version__ = "1.0.0"
