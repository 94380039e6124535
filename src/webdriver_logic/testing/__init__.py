"""Assertion helpers for tests written against relation queries."""

from webdriver_logic.testing.assertions import (
    assert_fails,
    assert_includes,
    assert_multiple,
    assert_results,
    assert_satisfies,
    assert_single,
)

__all__ = [
    "assert_single",
    "assert_multiple",
    "assert_satisfies",
    "assert_fails",
    "assert_results",
    "assert_includes",
]
