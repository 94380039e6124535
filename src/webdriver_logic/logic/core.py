"""Substitutions, unification and goal combinators.

A goal is a callable taking a substitution and returning an iterator of
successor substitutions. Substitutions are plain mappings from ``Var`` to
terms; extending one always builds a new mapping, so a substitution handed to
a goal is never changed behind the caller's back.

Example:
    >>> q = var("q")
    >>> run(0, q, lany(eq(q, 1), eq(q, 2)))
    (1, 2)
"""

from __future__ import annotations

import inspect
import itertools
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

Substitution = Mapping["Var", Any]
Goal = Callable[[Substitution], Iterator[Substitution]]


class Var:
    """A logic variable. Two variables are the same only if they are identical."""

    _counter = itertools.count()

    __slots__ = ("token", "name")

    def __init__(self, name: str | None = None) -> None:
        self.token = next(Var._counter)
        self.name = name

    def __repr__(self) -> str:
        return f"~{self.name or '_'}{self.token}"


def var(name: str | None = None) -> Var:
    """Create a fresh logic variable."""
    return Var(name)


def lvars(n: int) -> list[Var]:
    """Create ``n`` fresh logic variables."""
    return [Var() for _ in range(n)]


def isvar(term: Any) -> bool:
    return isinstance(term, Var)


def walk(term: Any, s: Substitution) -> Any:
    """Follow variable bindings in ``s`` until a non-variable or unbound variable."""
    while isvar(term) and term in s:
        term = s[term]
    return term


def unify(u: Any, v: Any, s: Substitution) -> Substitution | None:
    """Unify two terms under ``s``.

    Tuples and lists unify element-wise, mappings unify value-wise over equal
    key sets; every other value unifies only with an equal value.

    Returns:
        The extended substitution, or None if the terms do not unify
    """
    u = walk(u, s)
    v = walk(v, s)

    if isvar(u) and isvar(v) and u is v:
        return s
    if isvar(u):
        return {**s, u: v}
    if isvar(v):
        return {**s, v: u}

    if isinstance(u, (tuple, list)) and isinstance(v, (tuple, list)):
        if type(u) is not type(v) or len(u) != len(v):
            return None
        for a, b in zip(u, v):
            s = unify(a, b, s)
            if s is None:
                return None
        return s

    if isinstance(u, Mapping) and isinstance(v, Mapping):
        if u.keys() != v.keys():
            return None
        for key in u:
            s = unify(u[key], v[key], s)
            if s is None:
                return None
        return s

    return s if u == v else None


def reify(term: Any, s: Substitution) -> Any:
    """Substitute every bound variable inside ``term``."""
    term = walk(term, s)
    if isinstance(term, tuple):
        return tuple(reify(t, s) for t in term)
    if isinstance(term, list):
        return [reify(t, s) for t in term]
    if isinstance(term, dict):
        return {key: reify(value, s) for key, value in term.items()}
    return term


# ---------------------------------------------------------------------------
# Goals
# ---------------------------------------------------------------------------


def succeed(s: Substitution) -> Iterator[Substitution]:
    yield s


def fail(s: Substitution) -> Iterator[Substitution]:
    return iter(())


def eq(u: Any, v: Any) -> Goal:
    """Goal that succeeds when ``u`` and ``v`` unify."""

    def eq_goal(s: Substitution) -> Iterator[Substitution]:
        result = unify(u, v, s)
        if result is not None:
            yield result

    return eq_goal


def _conj(stream: Iterable[Substitution], goals: tuple[Goal, ...]) -> Iterator[Substitution]:
    if not goals:
        yield from stream
        return
    head, rest = goals[0], goals[1:]
    for s in stream:
        yield from _conj(head(s), rest)


def _interleave(streams: Iterable[Iterable[Substitution]]) -> Iterator[Substitution]:
    pending = deque(iter(stream) for stream in streams)
    while pending:
        stream = pending.popleft()
        try:
            s = next(stream)
        except StopIteration:
            continue
        yield s
        pending.append(stream)


def lall(*goals: Goal) -> Goal:
    """Conjunction: every goal must hold, solved left to right, depth first."""
    if not goals:
        return succeed

    def conj_goal(s: Substitution) -> Iterator[Substitution]:
        return _conj(goals[0](s), goals[1:])

    return conj_goal


def lany(*goals: Goal) -> Goal:
    """Disjunction: results of each goal are interleaved."""
    if not goals:
        return fail

    def disj_goal(s: Substitution) -> Iterator[Substitution]:
        return _interleave(goal(s) for goal in goals)

    return disj_goal


def conde(*clauses: Iterable[Goal]) -> Goal:
    """Disjunction of conjunctions, one conjunction per clause."""
    return lany(*(lall(*clause) for clause in clauses))


def fresh(fn: Callable[..., Goal]) -> Goal:
    """Introduce one fresh variable per parameter of ``fn``.

    Example:
        >>> fresh(lambda el, attr: lall(attributeo(el, attr, "external"), eq(q, attr)))
    """
    names = list(inspect.signature(fn).parameters)

    def fresh_goal(s: Substitution) -> Iterator[Substitution]:
        return fn(*(Var(name) for name in names))(s)

    return fresh_goal


# ---------------------------------------------------------------------------
# Search driver
# ---------------------------------------------------------------------------


def solutions(x: Any, *goals: Goal) -> Iterator[Any]:
    """Lazily yield ``x`` reified under every solution of the conjoined goals."""
    for s in lall(*goals)({}):
        yield reify(x, s)


def run(n: int, x: Any, *goals: Goal) -> tuple[Any, ...]:
    """Return the first ``n`` answers for ``x``; ``n == 0`` returns all of them."""
    results = solutions(x, *goals)
    if n == 0:
        return tuple(results)
    return tuple(itertools.islice(results, n))
