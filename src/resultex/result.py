"""
Result container — a value that is either Success(value) or Failure(error).

A Result[T] turns "an operation that may raise" into an ordinary value that
can be transformed, chained, recovered and inspected without try/except at
every call site.

    ┌──────────────┐  map_catching  ┌──────────────┐  map_catching  ┌──────────┐
    │ run_catching │──Success───────│   step 2     │──Success───────│  step 3  │──→ Result[T]
    └──────┬───────┘                └──────┬───────┘                └─────┬────┘
           │ Failure                       │ Failure                      │ Failure
           └───────────────────────────────┴──────────────────────────────┴──→ Result[T]

Guarded vs plain combinators:
  - run_catching, map_catching, recover_catching convert a raised Exception
    into a Failure. They are the only way into the container from raise-land.
  - map, flat_map, recover, get_or_else, fold do NOT guard the function they
    are given. If it raises, the exception propagates to the caller.
  - get_or_throw is the way back out: it raises the stored error.
"""

from __future__ import annotations

import functools
import traceback
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def _describe_error(error: Any) -> str:
    """Render an error the way the interpreter prints its last line: 'Type: message'."""
    if isinstance(error, BaseException):
        return "".join(traceback.format_exception_only(type(error), error)).strip()
    return repr(error)


class Result(Generic[T]):
    """
    Two-variant outcome container.

      - Success(value: T)          — the operation completed
      - Failure(error: BaseException) — the operation raised, or was declared failed

    Usage:
        >>> Result.run_catching(int, "21")
        Success(21)
        >>> Result.run_catching(int, "21.1").exception_or_null()
        ValueError("invalid literal for int() with base 10: '21.1'")
        >>> Result.run_catching(int, "21.1").get_or_default(12)
        12
    """

    def __new__(cls, *args: Any, **kwargs: Any) -> Result[T]:
        if cls is Result:
            raise TypeError(
                "Result cannot be instantiated directly; use Result.success() or Result.failure()"
            )
        return super().__new__(cls)

    # ──────────────────────── Introspection ────────────────────────

    def is_success(self) -> bool:
        """Check if this Result is a Success."""
        return isinstance(self, Success)

    def is_failure(self) -> bool:
        """Check if this Result is a Failure."""
        return isinstance(self, Failure)

    # ──────────────────────── Extraction (terminal) ────────────────────────

    def get_or_null(self) -> Optional[T]:
        """Return the success value, or None on failure. Never raises."""
        match self:
            case Success(v):
                return v
        return None

    def exception_or_null(self) -> Optional[BaseException]:
        """Return the stored error, or None on success. Never raises."""
        match self:
            case Failure(err):
                return err
        return None

    def get_or_default(self, default: T) -> T:
        """Return the success value, or `default` on failure."""
        match self:
            case Success(v):
                return v
            case _:
                return default

    def get_or_else(self, handler: Callable[[BaseException], T]) -> T:
        """
        Return the success value, or compute one from the error.

        `handler` is not guarded: if it raises, the exception propagates.
        """
        return self.fold(lambda v: v, handler)

    def get_or_throw(self) -> T:
        """
        Return the success value, or raise the stored error.

        This is the exit from container-land back into raise-land.
        """
        match self:
            case Success(v):
                return v
            case Failure(err):
                raise err
        raise TypeError("unreachable")  # pragma: no cover

    def fold(
        self,
        on_success: Callable[[T], R],
        on_failure: Callable[[BaseException], R],
    ) -> R:
        """
        Apply exactly one of two functions depending on the variant and
        return its result directly.

            result.fold(
                on_success=lambda v: f"Result: {v}",
                on_failure=lambda err: f"Failed: {err}",
            )
        """
        match self:
            case Success(v):
                return on_success(v)
            case Failure(err):
                return on_failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Transformations ────────────────────────

    def map(self, transform: Callable[[T], U]) -> Result[U]:
        """
        Transform the success value. Failure passes through with the same error.

        `transform` is not guarded — use map_catching when it may raise.

            Result.success(5).map(lambda x: x * 2)   # → Success(10)
        """
        match self:
            case Success(v):
                return Success(transform(v))
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def map_catching(self, transform: Callable[[T], U]) -> Result[U]:
        """
        Like map, but an exception raised by `transform` becomes a Failure.

            Result.success("1").map_catching(lambda s: int(s) + int("x"))  # → Failure(ValueError)
        """
        match self:
            case Success(v):
                return run_catching(transform, v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    def flat_map(self, mapper: Callable[[T], Result[U]]) -> Result[U]:
        """
        Chain a Result-returning function. Short-circuits on failure.

        `mapper` is not guarded.
        """
        match self:
            case Success(v):
                return mapper(v)
            case Failure(err):
                return Failure(err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Recovery ────────────────────────

    def recover(self, handler: Callable[[BaseException], T]) -> Result[T]:
        """
        Turn a failure into a success by computing a value from the error.

        `handler` is not guarded. Success passes through unchanged.
        """
        match self:
            case Success(_):
                return self
            case Failure(err):
                return Success(handler(err))
        raise TypeError("unreachable")  # pragma: no cover

    def recover_catching(self, handler: Callable[[BaseException], T]) -> Result[T]:
        """Like recover, but an exception raised by `handler` becomes a new Failure."""
        match self:
            case Success(_):
                return self
            case Failure(err):
                return run_catching(handler, err)
        raise TypeError("unreachable")  # pragma: no cover

    # ──────────────────────── Side Effects ────────────────────────

    def on_success(self, action: Callable[[T], Any]) -> Result[T]:
        """Run `action` with the value if this is a Success. Always returns self."""
        match self:
            case Success(v):
                action(v)
        return self

    def on_failure(self, action: Callable[[BaseException], Any]) -> Result[T]:
        """Run `action` with the error if this is a Failure. Always returns self."""
        match self:
            case Failure(err):
                action(err)
        return self

    # ──────────────────────── Execution Context ────────────────────────

    def within(self, execution_context: Any) -> Result[T]:
        """
        Hand this Result to an execution context.

            result = Result.run_catching(load).map_catching(parse).within(ctx)
        """
        return execution_context.execute(lambda: self)

    # ──────────────────────── Static Factories ────────────────────────

    @staticmethod
    def success(value: T) -> Result[T]:
        """Create a successful Result wrapping the given value."""
        return Success(value)

    @staticmethod
    def failure(error: BaseException) -> Result[T]:
        """Create a failed Result wrapping the given error."""
        return Failure(error)

    @staticmethod
    def run_catching(operation: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
        """See :func:`run_catching`."""
        return run_catching(operation, *args, **kwargs)

    @staticmethod
    def all_of(results: Iterable[Result[T]]) -> Result[List[T]]:
        """
        Collect Results into a Result of list.
        Returns the first failure encountered, or Success with all values.
        """
        values: list[T] = []
        for r in results:
            match r:
                case Success(v):
                    values.append(v)
                case Failure(err):
                    return Failure(err)
        return Success(values)

    # ──────────────────────── Dunder methods ────────────────────────

    def __bool__(self) -> bool:
        """Allow truthiness check: `if result: ...` succeeds only on Success."""
        return self.is_success()


@dataclass(frozen=True, slots=True, eq=False)
class Success(Result[T]):
    """The success track — wraps a value of type T (None included)."""

    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Success):
            return self.value == other.value
        if isinstance(other, Result):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Success", self.value))


@dataclass(frozen=True, slots=True, eq=False)
class Failure(Result[T]):
    """The failure track — wraps an error."""

    error: BaseException

    def __repr__(self) -> str:
        return f"Failure({_describe_error(self.error)})"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Failure):
            return self.error == other.error
        if isinstance(other, Result):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("Failure", id(self.error)))


# ──────────────────────── Guarded calls ────────────────────────


def run_catching(operation: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
    """
    Call `operation(*args, **kwargs)` and capture the outcome as a Result.

    Returns Success(return value) when it completes and Failure(exc) when it
    raises an Exception. KeyboardInterrupt, SystemExit and GeneratorExit are
    not Exceptions and still propagate.

        run_catching(int, "21")            # → Success(21)
        run_catching(lambda: int("21.1"))  # → Failure(ValueError: ...)
    """
    try:
        return Success(operation(*args, **kwargs))
    except Exception as e:
        return Failure(e)


def catching(fn: Callable[..., T]) -> Callable[..., Result[T]]:
    """
    Decorator form of run_catching: the wrapped function returns a Result
    instead of raising.

        @catching
        def to_int(text: str) -> int:
            return int(text)

        to_int("7")    # → Success(7)
        to_int("7.5")  # → Failure(ValueError: ...)
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Result[T]:
        return run_catching(fn, *args, **kwargs)

    return wrapper
