"""Relational solver used to compose document relations."""

from webdriver_logic.logic.core import (
    Goal,
    Substitution,
    Var,
    conde,
    eq,
    fail,
    fresh,
    isvar,
    lall,
    lany,
    reify,
    run,
    solutions,
    succeed,
    unify,
    var,
    lvars,
    walk,
)

__all__ = [
    "Goal",
    "Substitution",
    "Var",
    "conde",
    "eq",
    "fail",
    "fresh",
    "isvar",
    "lall",
    "lany",
    "reify",
    "run",
    "solutions",
    "succeed",
    "unify",
    "var",
    "lvars",
    "walk",
]
