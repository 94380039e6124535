"""Structural relations between elements."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from webdriver_logic.browser.context import QueryContext, active_context
from webdriver_logic.browser.oracle import NO_VALUE, BaseOracle, resolve
from webdriver_logic.browser.scope import Scope
from webdriver_logic.logic import Goal, Substitution
from webdriver_logic.relations.modes import Grounded, candidates, classify, extend


def _children(oracle: BaseOracle, parent: Any, scope: Scope) -> list[Any]:
    children = resolve(oracle.find_child_elements, parent, scope)
    if children is NO_VALUE:
        return []
    return list(children)


def childo(child_elem: Any, parent_elem: Any, context: QueryContext | None = None) -> Goal:
    """A relation where ``child_elem`` is below ``parent_elem`` on the current page.

    "Below" means matched by the child scope relative to the parent, which by
    default is every descendant. When the parent is not grounded, every
    element in the root scope is tried as a parent and its descendants are
    enumerated, so the cost grows with elements times descendants.
    """

    def child_goal(s: Substitution) -> Iterator[Substitution]:
        ctx = active_context(context)
        oracle = ctx.require_oracle()
        child = classify(child_elem, s)
        parent = classify(parent_elem, s)
        terms = (child_elem, parent_elem)

        if isinstance(parent, Grounded):
            if parent.value is None:
                return iter(())
            if isinstance(child, Grounded):
                return _membership(s, oracle, child.value, parent.value, ctx.child_scope, terms)
            return _descendants(s, oracle, (parent.value,), ctx.child_scope, terms)
        return _descendants(s, oracle, candidates(oracle, ctx.root_scope), ctx.child_scope, terms)

    return child_goal


def _membership(
    s: Substitution,
    oracle: BaseOracle,
    child: Any,
    parent: Any,
    scope: Scope,
    terms: tuple[Any, Any],
) -> Iterator[Substitution]:
    if any(candidate == child for candidate in _children(oracle, parent, scope)):
        yield from extend(s, terms, (child, parent))


def _descendants(
    s: Substitution,
    oracle: BaseOracle,
    parents: Iterable[Any],
    scope: Scope,
    terms: tuple[Any, Any],
) -> Iterator[Substitution]:
    for parent in parents:
        for child in _children(oracle, parent, scope):
            yield from extend(s, terms, (child, parent))
