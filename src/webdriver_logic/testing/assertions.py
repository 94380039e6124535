"""Assertions over query results.

Example:
    >>> assert_single(run(0, q, attributeo(q, "id", "pages-table")))
    >>> assert_fails(run(0, q, attributeo(q, "id", "no-such-id")))
    >>> assert_includes(["pages", "pages-table"], run(0, q, attributeo(el, "id", q)))
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable

from rich.console import Console
from rich.pretty import pretty_repr

console = Console()


def _show(results: list[Any]) -> None:
    console.print("Goal output:")
    console.print(pretty_repr(results))


def _as_expected(expected: Any) -> list[Any]:
    """Treat a single value (or mapping) as a one-element list of expected results."""
    if isinstance(expected, Iterable) and not isinstance(expected, (str, bytes, Mapping)):
        return list(expected)
    return [expected]


def assert_single(results: Iterable[Any], show: bool = False) -> None:
    """Assert that a run returned exactly one value (deterministic success)."""
    values = list(results)
    if show:
        _show(values)
    if len(values) != 1:
        raise AssertionError(f"Expected exactly one result, got {len(values)}: {pretty_repr(values)}")


def assert_multiple(results: Iterable[Any], show: bool = False) -> None:
    """Assert that a run returned more than one value (non-deterministic success)."""
    values = list(results)
    if show:
        _show(values)
    if len(values) <= 1:
        raise AssertionError(f"Expected more than one result, got {len(values)}: {pretty_repr(values)}")


def assert_satisfies(pred: Callable[[list[Any]], Any], results: Iterable[Any]) -> None:
    """Assert that ``pred`` holds for the list of returned values."""
    values = list(results)
    if not pred(values):
        raise AssertionError(f"Results do not satisfy predicate: {pretty_repr(values)}")


def assert_fails(results: Iterable[Any]) -> None:
    """Assert that a run returned nothing."""
    values = list(results)
    if values:
        raise AssertionError(f"Expected no results, got {pretty_repr(values)}")


def assert_results(expected: Any, results: Iterable[Any]) -> None:
    """Assert that the returned values equal ``expected``, in order.

    A single expected value may be passed on its own instead of in a list.
    """
    values = list(results)
    wanted = _as_expected(expected)
    if values != wanted:
        raise AssertionError(f"Expected {pretty_repr(wanted)}, got {pretty_repr(values)}")


def assert_includes(expected: Any, results: Iterable[Any]) -> None:
    """Assert that every expected value is among the returned values.

    The expected values need not be exhaustive.
    """
    values = list(results)
    missing = [item for item in _as_expected(expected) if item not in values]
    if missing:
        raise AssertionError(f"Missing {pretty_repr(missing)} from {pretty_repr(values)}")
