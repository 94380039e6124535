"""Relations over page-level facts."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from webdriver_logic.browser.context import QueryContext, active_context
from webdriver_logic.logic import Goal, Substitution
from webdriver_logic.relations.modes import extend


def titleo(value: Any, context: QueryContext | None = None) -> Goal:
    """The current page's title is ``value``."""

    def title_goal(s: Substitution) -> Iterator[Substitution]:
        oracle = active_context(context).require_oracle()
        return extend(s, (value,), (oracle.title(),))

    return title_goal


def current_urlo(value: Any, context: QueryContext | None = None) -> Goal:
    """The browser is currently at URL ``value``."""

    def current_url_goal(s: Substitution) -> Iterator[Substitution]:
        oracle = active_context(context).require_oracle()
        return extend(s, (value,), (oracle.current_url(),))

    return current_url_goal
