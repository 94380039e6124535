"""Relations between an element and one of its properties.

Each relation dispatches on which arguments are grounded:

- element grounded: one oracle query, unified with the value (which either
  tests equality or binds it)
- element fresh: every element in the root scope is queried in turn, one
  solution per element whose value unifies

``attributeo`` adds the attribute name as a third axis; an open name is
enumerated over the closed attribute vocabulary.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Callable

from webdriver_logic.browser.context import QueryContext, active_context
from webdriver_logic.browser.oracle import BaseOracle, resolve
from webdriver_logic.logic import Goal, Substitution
from webdriver_logic.relations.modes import Grounded, candidates, classify, extend


def attributeo(elem: Any, attr: Any, value: Any, context: QueryContext | None = None) -> Goal:
    """A relation where ``elem`` has value ``value`` for its ``attr`` attribute.

    Leaving both ``elem`` and ``attr`` fresh queries every element in the root
    scope for every known attribute name; narrow the scope with
    ``search_domain`` for such queries.

    Example:
        >>> run(0, q, attributeo(q, "id", "pages-table"))
        (<element>,)
    """

    def attribute_goal(s: Substitution) -> Iterator[Substitution]:
        ctx = active_context(context)
        oracle = ctx.require_oracle()
        target = classify(elem, s)
        name = classify(attr, s)

        if isinstance(target, Grounded):
            if target.value is None:
                return iter(())
            elements: Iterable[Any] = (target.value,)
        else:
            elements = candidates(oracle, ctx.root_scope)

        if isinstance(name, Grounded):
            names: tuple[Any, ...] = (name.value,)
        else:
            names = ctx.attribute_names

        return _attribute_stream(s, oracle, elements, names, (elem, attr, value))

    return attribute_goal


def _attribute_stream(
    s: Substitution,
    oracle: BaseOracle,
    elements: Iterable[Any],
    names: tuple[Any, ...],
    terms: tuple[Any, Any, Any],
) -> Iterator[Substitution]:
    for element in elements:
        for name in names:
            actual = resolve(oracle.attribute, element, name)
            yield from extend(s, terms, (element, name, actual))


def property_relation(name: str, operation: str, doc: str) -> Callable[..., Goal]:
    """Build a binary relation between an element and ``oracle.<operation>(element)``."""

    def relation(elem: Any, value: Any, context: QueryContext | None = None) -> Goal:
        def property_goal(s: Substitution) -> Iterator[Substitution]:
            ctx = active_context(context)
            oracle = ctx.require_oracle()
            target = classify(elem, s)

            if isinstance(target, Grounded):
                if target.value is None:
                    return iter(())
                elements: Iterable[Any] = (target.value,)
            else:
                elements = candidates(oracle, ctx.root_scope)
            return _property_stream(s, getattr(oracle, operation), elements, (elem, value))

        property_goal.__name__ = f"{name}_goal"
        return property_goal

    relation.__name__ = name
    relation.__qualname__ = name
    relation.__doc__ = doc
    return relation


def _property_stream(
    s: Substitution,
    query: Callable[[Any], Any],
    elements: Iterable[Any],
    terms: tuple[Any, Any],
) -> Iterator[Substitution]:
    for element in elements:
        actual = resolve(query, element)
        yield from extend(s, terms, (element, actual))


tago = property_relation("tago", "tag", "This ``elem`` has this ``tag`` name.")

texto = property_relation("texto", "text", "This ``elem`` has this visible ``text``.")

sizeo = property_relation(
    "sizeo",
    "size",
    """This ``elem`` has this ``size``, a ``{"width": w, "height": h}`` mapping.

    The mapping may itself hold variables, e.g. ``{"width": w, "height": 105}``.
    """,
)

locationo = property_relation(
    "locationo",
    "location",
    """This ``elem`` is at this ``location``, a ``{"x": x, "y": y}`` mapping.""",
)
