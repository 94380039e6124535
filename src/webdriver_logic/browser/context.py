"""Query context: the oracle and scopes relations read when they run.

The ambient context is held in a ContextVar. Overrides made with
``search_domain`` or ``using_oracle`` apply inside a ``with`` block only and
nest cleanly::

    with search_domain(root="css=#content > p *"):
        run(2, q, fresh(lambda el, attr: lall(attributeo(el, attr, "external"), eq(q, attr))))
"""

from __future__ import annotations

import contextvars
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, replace

from webdriver_logic.browser.oracle import BaseOracle
from webdriver_logic.browser.scope import (
    DEFAULT_CHILD_SCOPE,
    DEFAULT_ROOT_SCOPE,
    Scope,
    as_scope,
)
from webdriver_logic.browser.vocabulary import HTML_ATTRIBUTES
from webdriver_logic.core.exceptions import SessionError


@dataclass(frozen=True)
class QueryContext:
    """Everything a relation needs besides its arguments.

    Attributes:
        oracle: Active browser session, or None before one is set
        root_scope: Scope for top-level enumeration
        child_scope: Scope for enumerating an element's descendants
        attribute_names: Attribute names tried when the name is left open
    """

    oracle: BaseOracle | None = None
    root_scope: Scope = DEFAULT_ROOT_SCOPE
    child_scope: Scope = DEFAULT_CHILD_SCOPE
    attribute_names: tuple[str, ...] = HTML_ATTRIBUTES

    def require_oracle(self) -> BaseOracle:
        """Return the oracle, raising SessionError if none is set."""
        if self.oracle is None:
            raise SessionError("No active browser session; call set_oracle() or start_session() first")
        return self.oracle

    def with_scopes(
        self,
        root: Scope | str | None = None,
        child: Scope | str | None = None,
        attributes: Sequence[str] | None = None,
    ) -> QueryContext:
        """Return a copy with the given scopes or attribute vocabulary replaced."""
        changes: dict = {}
        if root is not None:
            changes["root_scope"] = as_scope(root)
        if child is not None:
            changes["child_scope"] = as_scope(child)
        if attributes is not None:
            changes["attribute_names"] = tuple(attributes)
        return replace(self, **changes)


_current: contextvars.ContextVar[QueryContext] = contextvars.ContextVar(
    "webdriver_logic_context",
    default=QueryContext(),
)


def current_context() -> QueryContext:
    return _current.get()


def set_context(context: QueryContext) -> None:
    _current.set(context)


def set_oracle(oracle: BaseOracle | None) -> None:
    """Install ``oracle`` as the ambient session, keeping the current scopes."""
    _current.set(replace(_current.get(), oracle=oracle))


@contextmanager
def using_oracle(oracle: BaseOracle) -> Iterator[QueryContext]:
    """Use ``oracle`` as the ambient session inside the block."""
    token = _current.set(replace(_current.get(), oracle=oracle))
    try:
        yield _current.get()
    finally:
        _current.reset(token)


@contextmanager
def search_domain(
    root: Scope | str | None = None,
    child: Scope | str | None = None,
    attributes: Sequence[str] | None = None,
) -> Iterator[QueryContext]:
    """Narrow enumeration inside the block.

    Args:
        root: Scope for top-level enumeration (e.g. ``"css=#content *"``)
        child: Scope for descendant enumeration
        attributes: Attribute names to try when the name is left open
    """
    token = _current.set(_current.get().with_scopes(root, child, attributes))
    try:
        yield _current.get()
    finally:
        _current.reset(token)


def active_context(context: QueryContext | None = None) -> QueryContext:
    """Pick the explicit context if given, otherwise the ambient one."""
    return context if context is not None else _current.get()
