"""
Test assertions for Result values.

Expressive assert helpers that produce clear failure messages:

    from resultex import ResultAssertions

    def test_parse_rejects_decimal():
        result = run_catching(int, "21.1")
        ResultAssertions.assert_failure(result, ValueError)
        ResultAssertions.assert_failure_message_contains(result, "21.1")
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from resultex.errors import BusinessError
from resultex.result import Result

T = TypeVar("T")


class ResultAssertions:
    """Expressive test assertions for Result values."""

    @staticmethod
    def assert_success(result: Result[T], message: str = "") -> T:
        """
        Assert the Result is a Success and return the value.

            value = ResultAssertions.assert_success(result)
        """
        context = f" — {message}" if message else ""
        assert result.is_success(), f"Expected Success but got {result!r}{context}"
        return result.get_or_throw()

    @staticmethod
    def assert_success_value(result: Result[T], expected_value: Any) -> None:
        """Assert the Result is a Success with the specific value."""
        value = ResultAssertions.assert_success(result)
        assert value == expected_value, (
            f"Expected success value {expected_value!r} but got {value!r}"
        )

    @staticmethod
    def assert_failure(
        result: Result[T],
        expected_type: Optional[type[BaseException]] = None,
        message: str = "",
    ) -> BaseException:
        """
        Assert the Result is a Failure, optionally checking the error type.

            error = ResultAssertions.assert_failure(result, ValueError)
        """
        context = f" — {message}" if message else ""
        assert result.is_failure(), f"Expected Failure but got {result!r}{context}"
        error = result.exception_or_null()
        assert error is not None
        if expected_type is not None:
            assert isinstance(error, expected_type), (
                f"Expected error of type {expected_type.__name__} "
                f"but got {type(error).__name__}: {error}{context}"
            )
        return error

    @staticmethod
    def assert_failure_message_contains(result: Result[T], substring: str) -> None:
        """Assert that the failure message contains the given substring."""
        error = ResultAssertions.assert_failure(result)
        assert substring in str(error), (
            f"Expected failure message to contain {substring!r} "
            f"but message was: {str(error)!r}"
        )

    @staticmethod
    def assert_business_error(result: Result[T], code: Optional[str] = None) -> BusinessError:
        """Assert the Result failed with a BusinessError, optionally with a given code."""
        error = ResultAssertions.assert_failure(result, BusinessError)
        assert isinstance(error, BusinessError)
        if code is not None:
            assert error.code == code, f"Expected error code {code!r} but got {error.code!r}"
        return error
