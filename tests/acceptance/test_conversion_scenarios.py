"""
Acceptance tests — end-to-end conversion workflows built from Result combinators.

Each scenario is a small application function written the way callers are
expected to use the library, exercised through its public behaviour:

  - try/except and run_catching produce equivalent Results
  - "stop at first failure" pipelines chained with map_catching
  - "anyway" pipelines that fall back through recover_catching to a default
  - "result or not applicable" returned as Optional[Result]
  - branching with if/else vs on_success/on_failure
"""

from __future__ import annotations

import sys
from typing import Optional

from resultex import BusinessError, Result, ResultAssertions, run_catching

from tests.conftest import to_int_safe, to_int_safe_naive


def false_value(error: BaseException) -> str:
    # Expected format: "invalid literal for int() with base 10: '1.1'"
    return f"False format by {str(error).split(chr(39))[1]}"


def add_as_string(a: str, b: str) -> str:
    return run_catching(lambda: f"{int(a) + int(b)}").get_or_else(false_value)


def add_as_string_folded(a: str, b: str) -> str:
    return run_catching(lambda: f"{int(a) + int(b)}").fold(
        on_success=lambda total: f"Result: {total}",
        on_failure=false_value,
    )


def quadratic(x: int, a: str, b: str, c: str) -> Result[int]:
    return (
        run_catching(lambda: int(a) * x * x)
        .map_catching(lambda acc: acc + int(b) * x)
        .map_catching(lambda acc: acc + int(c))
    )


def to_int_anyway(text: str) -> int:
    return (
        to_int_safe(text)
        .recover_catching(lambda _: int(float(text)))
        .get_or_default(sys.maxsize)
    )


def sign_of_int(text: str) -> Optional[Result[str]]:
    result = to_int_safe(text)
    if result.is_failure():
        return Result.failure(result.exception_or_null())
    value = result.get_or_throw()
    if value > 0:
        return Result.success("+")
    if value < 0:
        return Result.success("-")
    return None


def check_stock(quantity: str, available: int) -> Result[int]:
    return to_int_safe(quantity).map(lambda wanted: _reserve(wanted, available))


def _reserve(wanted: int, available: int) -> int:
    if wanted > available:
        raise BusinessError("OUT_OF_STOCK", f"Only {available} left", f"requested {wanted}")
    return available - wanted


class TestEquivalentConstructions:
    def test_try_except_and_run_catching_agree_on_success(self):
        naive, guarded = to_int_safe_naive("21"), to_int_safe("21")
        assert naive.get_or_null() == guarded.get_or_null() == 21
        assert naive.is_success() and guarded.is_success()
        assert str(naive) == "Success(21)"

    def test_try_except_and_run_catching_agree_on_failure(self):
        naive, guarded = to_int_safe_naive("21.1"), to_int_safe("21.1")
        assert str(naive.exception_or_null()) == str(guarded.exception_or_null())
        assert naive.is_failure() and guarded.is_failure()
        assert str(naive) == "Failure(ValueError: invalid literal for int() with base 10: '21.1')"


class TestComputedFallbacks:
    def test_get_or_else(self):
        assert add_as_string("1", "2") == "3"
        assert add_as_string("1", "1.1") == "False format by 1.1"

    def test_fold(self):
        assert add_as_string_folded("1", "4") == "Result: 5"
        assert add_as_string_folded("1.3", "4") == "False format by 1.3"


class TestStopAtFirstFailure:
    def test_all_coefficients_valid(self):
        ResultAssertions.assert_success_value(quadratic(1, "1", "2", "3"), 6)
        ResultAssertions.assert_success_value(quadratic(2, "1", "2", "3"), 11)

    def test_reports_first_offending_coefficient(self):
        ResultAssertions.assert_failure_message_contains(quadratic(1, "1.1", "2", "3"), "1.1")
        ResultAssertions.assert_failure_message_contains(quadratic(1, "1", "2.2", "3"), "2.2")
        ResultAssertions.assert_failure_message_contains(quadratic(1, "1", "2", "3.3"), "3.3")

    def test_later_steps_do_not_overwrite_first_error(self):
        error = ResultAssertions.assert_failure(quadratic(1, "1", "2.2", "3.3"), ValueError)
        assert "2.2" in str(error)
        assert "3.3" not in str(error)


class TestAnywayStrategy:
    def test_integer_text(self):
        assert to_int_anyway("2") == 2

    def test_decimal_text_truncates(self):
        assert to_int_anyway("2.2") == 2

    def test_scientific_notation(self):
        assert to_int_anyway(" 23.81e5") == 2381000

    def test_unparseable_text_uses_default(self):
        assert to_int_anyway(" Very match") == sys.maxsize


class TestNotApplicable:
    def test_failure_is_reported(self):
        result = sign_of_int("1.1")
        assert result is not None
        ResultAssertions.assert_failure_message_contains(result, "1.1")

    def test_zero_has_no_sign(self):
        assert sign_of_int("0") is None

    def test_signs(self):
        assert sign_of_int("+11").get_or_null() == "+"
        assert sign_of_int("-112").get_or_null() == "-"


class TestBranchingStyles:
    def test_if_else_branching(self):
        seen: list[str] = []
        result = to_int_safe("12")
        if result.is_success():
            seen.append(f"value {result.get_or_null()}")
        else:
            seen.append("error")
        assert seen == ["value 12"]

    def test_hooks_on_success(self):
        seen: list[str] = []
        to_int_safe("12").on_success(lambda v: seen.append("value")).on_failure(
            lambda e: seen.append("error")
        )
        assert seen == ["value"]

    def test_hooks_on_failure(self):
        seen: list[str] = []
        to_int_safe("12.1").on_success(lambda v: seen.append("value")).on_failure(
            lambda e: seen.append("error")
        )
        assert seen == ["error"]

    def test_result_less_processing(self):
        processed: list[int] = []

        def process(text: str) -> Optional[BaseException]:
            return to_int_safe(text).on_success(processed.append).exception_or_null()

        assert process("25") is None
        assert processed == [25]
        assert process("25.9") is not None
        assert processed == [25]


class TestBusinessFailures:
    def test_business_error_raised_inside_map_propagates(self):
        try:
            check_stock("5", available=3)
        except BusinessError as e:
            assert e.code == "OUT_OF_STOCK"
            assert e.details == "requested 5"
        else:
            raise AssertionError("expected BusinessError")

    def test_business_error_captured_by_run_catching(self):
        result = run_catching(check_stock, "5", 3).flat_map(lambda inner: inner)
        error = ResultAssertions.assert_business_error(result, code="OUT_OF_STOCK")
        assert error.message == "Only 3 left"

    def test_within_stock(self):
        ResultAssertions.assert_success_value(check_stock("2", available=3), 1)

    def test_conversion_failure_wrapped_as_business_error(self):
        wrapped = to_int_safe("two").fold(
            on_success=Result.success,
            on_failure=lambda e: Result.failure(
                BusinessError("BAD_QTY", "Quantity must be a number", cause=e)
            ),
        )
        error = ResultAssertions.assert_business_error(wrapped, code="BAD_QTY")
        assert isinstance(error.__cause__, ValueError)
