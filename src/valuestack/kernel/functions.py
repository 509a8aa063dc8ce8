"""Helpers for composing two-argument predicates and consumers.

These are the callables ``Value2.if_all_present`` and ``Value2.reduce_all``
receive, so composing them keeps both values named and typed.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

S = TypeVar("S")
T = TypeVar("T")

Predicate2 = Callable[[S, T], bool]
Consumer2 = Callable[[S, T], Any]


def both(first: Predicate2[S, T], other: Predicate2[S, T]) -> Predicate2[S, T]:
    """Short-circuiting logical AND of two predicates."""
    return lambda s, t: first(s, t) and other(s, t)


def either(first: Predicate2[S, T], other: Predicate2[S, T]) -> Predicate2[S, T]:
    """Short-circuiting logical OR of two predicates."""
    return lambda s, t: first(s, t) or other(s, t)


def negate(predicate: Predicate2[S, T]) -> Predicate2[S, T]:
    return lambda s, t: not predicate(s, t)


def and_then(first: Consumer2[S, T], after: Consumer2[S, T]) -> Consumer2[S, T]:
    """Run ``first`` then ``after`` with the same arguments.

    If ``first`` raises, ``after`` does not run.
    """
    def run(s: S, t: T) -> None:
        first(s, t)
        after(s, t)

    return run
