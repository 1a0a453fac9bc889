"""Composable record predicates.

A :class:`Predicate` is a boolean rule over one record. Predicates combine
with ``&``, ``|`` and ``~`` so search and filter stages can be assembled from
small per-field rules::

    in_hcm = LambdaPredicate(lambda a: a.location is Location.HCM, name="in_hcm")
    laptops = LambdaPredicate(lambda a: "laptop" in a.name.casefold())
    keep = in_hcm & laptops
    [a for a in assets if keep(a)]
"""

from __future__ import annotations

import abc
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class Predicate(abc.ABC, Generic[T]):
    """Abstract boolean rule with operator overloads."""

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    def __and__(self, other: "Predicate[T]") -> "Predicate[T]":
        if isinstance(other, AlwaysTrue):
            return self
        return AndPredicate(self, other)

    def __or__(self, other: "Predicate[T]") -> "Predicate[T]":
        return OrPredicate(self, other)

    def __invert__(self) -> "Predicate[T]":
        return NotPredicate(self)


class AlwaysTrue(Predicate[T]):
    """Neutral element of ``&``; used when a stage has nothing to filter."""

    def is_satisfied_by(self, candidate: T) -> bool:  # noqa: ARG002
        return True

    def __and__(self, other: Predicate[T]) -> Predicate[T]:
        return other

    def __repr__(self) -> str:  # pragma: no cover
        return "ALWAYS"


class AndPredicate(Predicate[T]):
    def __init__(self, left: Predicate[T], right: Predicate[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)


class OrPredicate(Predicate[T]):
    def __init__(self, left: Predicate[T], right: Predicate[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) or self._right.is_satisfied_by(candidate)


class NotPredicate(Predicate[T]):
    def __init__(self, inner: Predicate[T]) -> None:
        self._inner = inner

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._inner.is_satisfied_by(candidate)


class LambdaPredicate(Predicate[T]):
    """Wraps a plain callable as a :class:`Predicate`."""

    def __init__(self, fn: Callable[[T], bool], *, name: str = "") -> None:
        self._fn = fn
        self.name: str = name or getattr(fn, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._fn(candidate))

    def __repr__(self) -> str:  # pragma: no cover
        return f"LambdaPredicate({self.name!r})"


ALWAYS: Predicate = AlwaysTrue()
NEVER: Predicate = NotPredicate(ALWAYS)


def all_of(predicates: Iterable[Predicate[T]]) -> Predicate[T]:
    """Conjunction of *predicates*; :data:`ALWAYS` when there are none."""
    result: Predicate[T] = ALWAYS
    for predicate in predicates:
        result = result & predicate
    return result


def any_of(predicates: Iterable[Predicate[T]]) -> Predicate[T]:
    """Disjunction of *predicates*; :data:`NEVER` when there are none."""
    items = list(predicates)
    if not items:
        return NEVER
    result = items[0]
    for predicate in items[1:]:
        result = result | predicate
    return result


__all__ = [
    "ALWAYS",
    "NEVER",
    "AlwaysTrue",
    "AndPredicate",
    "LambdaPredicate",
    "NotPredicate",
    "OrPredicate",
    "Predicate",
    "all_of",
    "any_of",
]
