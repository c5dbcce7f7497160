"""
Shared test fixtures and helpers for the resultex test suite.

Provides the string-to-number conversions used as example workloads, and
resets structlog after every test so configuration made by one test never
leaks into log captures of another.
"""

from __future__ import annotations

import pytest
import structlog

from resultex import Result, run_catching


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults around each test."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


def to_int_safe(text: str) -> Result[int]:
    """Parse an integer, capturing ValueError into a Failure."""
    return run_catching(int, text)


def to_int_safe_naive(text: str) -> Result[int]:
    """Same as to_int_safe, written out with try/except."""
    try:
        return Result.success(int(text))
    except ValueError as e:
        return Result.failure(e)
