"""
Execution contexts — separate WHAT (the Result pipeline) from HOW it is run.

A pipeline is a plain function returning Result[T]. An execution context
wraps that function with cross-cutting behaviour (logging, timing) without
the pipeline knowing about it:

    def parse_coefficients(raw: list[str]) -> Result[list[int]]:
        return Result.all_of(run_catching(int, s) for s in raw)

    ctx = LoggingExecutionContext(operation="parse_coefficients")
    result = ctx.execute(lambda: parse_coefficients(["1", "2", "x"]))

    # Or using the decorator
    @with_context(ctx)
    def handle(raw: list[str]) -> Result[list[int]]:
        return parse_coefficients(raw)
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

import structlog

from resultex.config import ResultexSettings
from resultex.errors import BusinessError
from resultex.result import Failure, Result, Success, run_catching

T = TypeVar("T")
log = structlog.get_logger()


# ──────────────────────── Protocol (Interface) ────────────────────────


@runtime_checkable
class ExecutionContext(Protocol):
    """
    Anything with an execute(computation) method that runs a zero-argument,
    Result-returning callable and hands back its Result.
    """

    def execute(self, computation: Callable[[], Result[T]]) -> Result[T]:
        """Run `computation` and return the Result it produced."""
        ...


# ──────────────────────── NoOp ────────────────────────


class NoOpExecutionContext:
    """Runs the computation as is. Default inner context of LoggingExecutionContext."""

    def execute(self, computation: Callable[[], Result[T]]) -> Result[T]:
        return computation()


# ──────────────────────── Logging ────────────────────────


class LoggingExecutionContext:
    """
    Execution context that logs entry, exit, duration, and result state.

    Wraps another context (decorator pattern). A computation that raises
    instead of returning a Result is captured through run_catching, so the
    caller always gets a Result back.

        ctx = LoggingExecutionContext(operation="import_orders")
    """

    def __init__(
        self,
        inner: ExecutionContext | None = None,
        operation: str = "unknown",
        log_level: str = "info",
        include_timing: bool = True,
    ) -> None:
        self._inner = inner or NoOpExecutionContext()
        self._operation = operation
        self._log_level = getattr(logging, log_level.upper(), logging.INFO)
        self._include_timing = include_timing

    @classmethod
    def from_settings(
        cls,
        settings: ResultexSettings,
        operation: str = "unknown",
        inner: ExecutionContext | None = None,
    ) -> LoggingExecutionContext:
        """Build a context whose level and timing follow ResultexSettings."""
        return cls(
            inner=inner,
            operation=operation,
            log_level=settings.log_level,
            include_timing=settings.log_operation_timing,
        )

    def execute(self, computation: Callable[[], Result[T]]) -> Result[T]:
        log.log(self._log_level, "execution.started", operation=self._operation)
        start = time.monotonic()

        outcome = run_catching(self._inner.execute, computation)
        elapsed = round(time.monotonic() - start, 3)

        match outcome:
            case Failure(err):
                log.error("execution.raised", **self._event_fields(elapsed, err))
                return Failure(err)
            case Success(result):
                log.log(
                    self._log_level,
                    "execution.completed",
                    state="SUCCESS" if result.is_success() else "FAILURE",
                    **self._event_fields(elapsed, result.exception_or_null()),
                )
                return result
        raise TypeError("unreachable")  # pragma: no cover

    def _event_fields(self, elapsed: float, error: BaseException | None) -> dict[str, Any]:
        fields: dict[str, Any] = {"operation": self._operation}
        if self._include_timing:
            fields["elapsed_seconds"] = elapsed
        if isinstance(error, BusinessError):
            fields["error"] = error.to_dict()
        elif error is not None:
            fields["error"] = str(error)
            fields["error_type"] = type(error).__name__
        return fields


# ──────────────────────── Composable ────────────────────────


class ComposableExecutionContext:
    """
    Nest several execution contexts; the first one given runs outermost.

        timed_parse = ComposableExecutionContext(
            LoggingExecutionContext(operation="import_batch"),
            LoggingExecutionContext(operation="parse_rows", log_level="debug"),
        )
        timed_parse.execute(lambda: Result.all_of(run_catching(int, s) for s in rows))
    """

    def __init__(self, *contexts: ExecutionContext) -> None:
        if not contexts:
            raise ValueError("At least one execution context is required")
        self._contexts = tuple(contexts)

    def execute(self, computation: Callable[[], Result[T]]) -> Result[T]:
        nested = functools.reduce(
            lambda inner, ctx: functools.partial(ctx.execute, inner),
            reversed(self._contexts),
            computation,
        )
        return nested()


# ──────────────────────── Decorator Helper ────────────────────────


def with_context(ctx: ExecutionContext) -> Callable:
    """
    Decorator to run a Result-returning function inside an execution context.

        @with_context(LoggingExecutionContext(operation="add"))
        def add(a: str, b: str) -> Result[int]:
            return run_catching(int, a).map_catching(lambda x: x + int(b))
    """

    def decorator(fn: Callable[..., Result[T]]) -> Callable[..., Result[T]]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Result[T]:
            return ctx.execute(lambda: fn(*args, **kwargs))
        return wrapper
    return decorator
