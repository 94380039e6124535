"""Argument binding states and the helpers relations share."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Union

from webdriver_logic.browser.oracle import NO_VALUE, BaseOracle
from webdriver_logic.browser.scope import Scope
from webdriver_logic.logic import Substitution, Var, isvar, unify, walk

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Grounded:
    """An argument whose walked value is concrete."""

    value: Any


@dataclass(frozen=True)
class Fresh:
    """An argument that is still an unbound variable."""

    var: Var


Binding = Union[Grounded, Fresh]


def classify(term: Any, s: Substitution) -> Binding:
    """Walk ``term`` under ``s`` and tag it as Grounded or Fresh."""
    value = walk(term, s)
    if isvar(value):
        return Fresh(value)
    return Grounded(value)


def is_missing(value: Any) -> bool:
    """True for values the oracle could not supply or that do not exist."""
    return value is NO_VALUE or value is None


def extend(s: Substitution, terms: Sequence[Any], values: Sequence[Any]) -> Iterator[Substitution]:
    """Yield ``s`` extended so ``terms`` unify with ``values``, if possible.

    Yields nothing when any value is missing or the unification fails.
    """
    if any(is_missing(value) for value in values):
        return
    result = unify(tuple(terms), tuple(values), s)
    if result is not None:
        yield result


def candidates(oracle: BaseOracle, scope: Scope) -> Iterator[Any]:
    """Lazily enumerate the elements in ``scope``; the oracle is asked on first pull."""
    elements = oracle.find_elements(scope)
    logger.debug(f"Enumerating {len(elements)} candidates in {scope}")
    yield from elements
