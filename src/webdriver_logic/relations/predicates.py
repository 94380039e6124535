"""Unary element predicates.

With a fresh element each predicate filters the root-scope enumeration; with a
grounded element it asks the oracle once and succeeds iff the answer is true.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Callable

from webdriver_logic.browser.context import QueryContext, active_context
from webdriver_logic.browser.oracle import resolve
from webdriver_logic.logic import Goal, Substitution
from webdriver_logic.relations.modes import Grounded, candidates, classify, extend


def predicate_relation(name: str, operation: str, doc: str) -> Callable[..., Goal]:
    """Build a unary relation that holds for elements where ``oracle.<operation>`` is true."""

    def relation(elem: Any, context: QueryContext | None = None) -> Goal:
        def predicate_goal(s: Substitution) -> Iterator[Substitution]:
            ctx = active_context(context)
            oracle = ctx.require_oracle()
            target = classify(elem, s)

            if isinstance(target, Grounded):
                elements: Iterable[Any] = (target.value,)
            else:
                elements = candidates(oracle, ctx.root_scope)
            return _filter(s, getattr(oracle, operation), elements, elem)

        predicate_goal.__name__ = f"{name}_goal"
        return predicate_goal

    relation.__name__ = name
    relation.__qualname__ = name
    relation.__doc__ = doc
    return relation


def _filter(
    s: Substitution,
    check: Callable[[Any], bool],
    elements: Iterable[Any],
    elem: Any,
) -> Iterator[Substitution]:
    for element in elements:
        # NO_VALUE is falsy, so a transient fault counts as "does not hold"
        if resolve(check, element):
            yield from extend(s, (elem,), (element,))


displayedo = predicate_relation(
    "displayedo", "is_displayed", "``elem`` is displayed on the page."
)

enabledo = predicate_relation(
    "enabledo", "is_enabled", "``elem`` is enabled (e.g. not a disabled form field)."
)

existso = predicate_relation(
    "existso", "is_exists", "``elem`` refers to an element that exists in the document."
)

presento = predicate_relation(
    "presento",
    "is_present",
    "``elem`` is present: it exists and is displayed.",
)

selectedo = predicate_relation(
    "selectedo", "is_selected", "``elem`` is selected (options, checkboxes, radio buttons)."
)

visibleo = predicate_relation("visibleo", "is_visible", "``elem`` is visible.")
