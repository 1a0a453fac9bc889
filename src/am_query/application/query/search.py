"""Application query – free-text search predicate."""
from __future__ import annotations

from typing import Any

from am_query.application.query.registry import DEFAULT_REGISTRY, EntityProfile, FieldAccessorRegistry, Getter
from am_query.domain.enums import EntityKind
from am_query.kernel.predicates import ALWAYS, LambdaPredicate, Predicate, any_of


def normalize_term(term: str | None) -> str | None:
    """Trimmed, case-folded term; ``None`` when there is nothing to search for."""
    if term is None:
        return None
    normalized = term.strip().casefold()
    return normalized or None


def _contains(getter: Getter, needle: str) -> Predicate[Any]:
    def match(record: Any) -> bool:
        value = getter(record)
        return value is not None and needle in str(value).strip().casefold()

    return LambdaPredicate(match, name="contains")


def search_predicate(profile: EntityProfile, term: str | None) -> Predicate[Any]:
    needle = normalize_term(term)
    if needle is None:
        return ALWAYS
    return any_of(_contains(getter, needle) for getter in profile.search_fields)


def build_search_predicate(
    kind: EntityKind | str,
    term: str | None,
    *,
    registry: FieldAccessorRegistry = DEFAULT_REGISTRY,
) -> Predicate[Any]:
    """Substring match of *term* against any searchable field of *kind*.

    Matching is case-insensitive and substring-only; there is no tokenization.
    A ``None``, empty or whitespace-only term yields the always-true predicate.
    """
    return search_predicate(registry.profile(kind), term)


__all__ = ["build_search_predicate", "normalize_term", "search_predicate"]
