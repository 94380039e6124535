"""Oracle interface: the live browser session relations consult."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Callable

from webdriver_logic.browser.scope import Scope
from webdriver_logic.core.exceptions import TransientOracleError

logger = logging.getLogger(__name__)


class _NoValue:
    """Marker for a value the oracle could not supply."""

    _instance: _NoValue | None = None

    def __new__(cls) -> _NoValue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


NO_VALUE = _NoValue()


def resolve(query: Callable[..., Any], *args: Any) -> Any:
    """Run an oracle query, turning transient faults into ``NO_VALUE``.

    Only ``ElementStateError`` and ``UnknownServerError`` are absorbed; every
    other exception propagates to the caller.

    Args:
        query: Bound oracle method
        *args: Arguments for the query

    Returns:
        The query result, or NO_VALUE
    """
    try:
        return query(*args)
    except TransientOracleError as e:
        logger.debug(f"No value from {getattr(query, '__name__', query)}: {e}")
        return NO_VALUE


class BaseOracle(ABC):
    """Base class for document oracles.

    Subclasses supply element enumeration, per-element queries and page
    facts. ``is_present`` and ``is_visible`` are derived here so they agree
    with ``is_exists`` and ``is_displayed`` for every oracle.

    Element queries may raise ``ElementStateError`` or ``UnknownServerError``
    for a single element; any other failure should be raised as
    ``OracleError``.
    """

    name: str = "base"

    # Enumeration

    @abstractmethod
    def find_elements(self, scope: Scope) -> Sequence[Any]:
        """Return the elements matching ``scope`` in document order."""

    @abstractmethod
    def find_child_elements(self, parent: Any, scope: Scope) -> Sequence[Any]:
        """Return the elements under ``parent`` matching ``scope``."""

    def find_element(self, scope: Scope) -> Any | None:
        """Return the first element matching ``scope``, or None."""
        elements = self.find_elements(scope)
        return elements[0] if elements else None

    # Element properties

    @abstractmethod
    def attribute(self, element: Any, name: str) -> str | None:
        """Return the attribute value, or None if the element lacks it."""

    @abstractmethod
    def tag(self, element: Any) -> str: ...

    @abstractmethod
    def text(self, element: Any) -> str: ...

    @abstractmethod
    def size(self, element: Any) -> dict[str, int]:
        """Return ``{"width": ..., "height": ...}``."""

    @abstractmethod
    def location(self, element: Any) -> dict[str, int]:
        """Return ``{"x": ..., "y": ...}``."""

    # Element predicates

    @abstractmethod
    def is_displayed(self, element: Any) -> bool: ...

    @abstractmethod
    def is_enabled(self, element: Any) -> bool: ...

    @abstractmethod
    def is_exists(self, element: Any) -> bool: ...

    @abstractmethod
    def is_selected(self, element: Any) -> bool: ...

    def is_present(self, element: Any) -> bool:
        """An element is present when it exists and is displayed."""
        return self.is_exists(element) and self.is_displayed(element)

    def is_visible(self, element: Any) -> bool:
        return self.is_displayed(element)

    # Page facts

    @abstractmethod
    def title(self) -> str: ...

    @abstractmethod
    def current_url(self) -> str: ...

    # Session

    @abstractmethod
    def navigate(self, url: str) -> None: ...

    @abstractmethod
    def quit(self) -> None: ...
