"""
Business errors — structured exceptions for application-level failures.

A BusinessError is an ordinary Exception, so it can be raised and caught like
any other, or stored as the payload of a Failure:

    >>> err = BusinessError("CODE313", "Some error 1")
    >>> err.code, err.message, err.details, err.cause
    ('CODE313', 'Some error 1', None, None)
    >>> Result.failure(err).exception_or_null() is err
    True

Also provides two helpers for inspecting any captured error: the full
formatted stack trace and the number of captured frames.
"""

from __future__ import annotations

import traceback
from typing import Any, Optional


class BusinessError(Exception):
    """
    Base class for business-specific errors.

    All fields are optional and stored exactly as given:
      - code:    machine-readable identifier, e.g. "ORDER_LIMIT_EXCEEDED"
      - message: human-readable description (also what str(error) shows)
      - details: free-form context
      - cause:   the underlying exception; installed as __cause__ as well so
                 tracebacks render the chain

    Equality is identity, as for every other exception.
    """

    def __init__(
        self,
        code: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        if message is None:
            super().__init__()
        else:
            super().__init__(message)
        self.code = code
        self.message = message
        self.details = details
        self.cause = cause
        self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Plain dict of the error fields, suitable as structured log context."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "cause": None if self.cause is None else _describe(self.cause),
        }

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}"
            for name, value in (
                ("code", self.code),
                ("message", self.message),
                ("details", self.details),
                ("cause", self.cause),
            )
            if value is not None
        )
        return f"{type(self).__name__}({fields})"


def _describe(error: BaseException) -> str:
    return "".join(traceback.format_exception_only(type(error), error)).strip()


def full_stack_trace(error: BaseException) -> str:
    """
    Full stack trace string including the exception chain.

    For an error that was never raised only the 'Type: message' lines appear.
    """
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


def stack_depth(error: BaseException) -> int:
    """Number of frames captured in the error's traceback (0 if never raised)."""
    return len(traceback.extract_tb(error.__traceback__))
