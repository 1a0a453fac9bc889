"""Application query – multi-key comparator.

Sort keys fold left to right: the first key is primary and every later key
only breaks ties left by the keys before it. ``None`` compares below every
value, so ascending and descending orders are exact mirrors of each other.
Strings compare case-insensitively first and by their raw value second.
Naive datetimes are read as UTC so snapshots mixing naive and aware values
still compare.
"""
from __future__ import annotations

import functools
from datetime import UTC, datetime
from typing import Any, Callable, Iterable, Sequence, TypeVar

from am_query.application.query.registry import DEFAULT_REGISTRY, EntityProfile, FieldAccessor, FieldAccessorRegistry
from am_query.application.query.request import SortKey
from am_query.domain.enums import EntityKind
from am_query.observability.logging import get_logger

T = TypeVar("T")
Comparator = Callable[[Any, Any], int]

_log = get_logger(__name__)


def _normalize(value: Any) -> Any:
    if isinstance(value, str):
        return (value.casefold(), value)
    if isinstance(value, tuple):
        return tuple(_normalize(v) for v in value)
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def compare_values(left: Any, right: Any) -> int:
    """Three-way comparison with ``None`` as the minimum."""
    if left is None or right is None:
        if left is None and right is None:
            return 0
        return -1 if left is None else 1
    a, b = _normalize(left), _normalize(right)
    return (a > b) - (a < b)


def resolve_sort_keys(profile: EntityProfile, sort_keys: Sequence[SortKey] | None) -> list[tuple[FieldAccessor, bool]]:
    """Accessor and descending flag for each key, applying the profile defaults."""
    keys = tuple(sort_keys or ()) or profile.default_sort
    resolved: list[tuple[FieldAccessor, bool]] = []
    for key in keys:
        descending = key.descending
        if not profile.is_known(key.field):
            _log.debug(
                "query.sort_key_unknown",
                kind=profile.kind.value,
                key=key.field,
                fallback=profile.default_key,
                known=sorted(profile.keys),
            )
            descending = descending and profile.fallback_keeps_direction
        resolved.append((profile.resolve(key.field), descending))
    return resolved


def comparator(profile: EntityProfile, sort_keys: Sequence[SortKey] | None) -> Comparator:
    resolved = resolve_sort_keys(profile, sort_keys)

    def compare(left: Any, right: Any) -> int:
        for accessor, descending in resolved:
            result = compare_values(accessor(left), accessor(right))
            if result:
                return -result if descending else result
        return 0

    return compare


def build_comparator(
    kind: EntityKind | str,
    sort_keys: Sequence[SortKey] | None,
    *,
    registry: FieldAccessorRegistry = DEFAULT_REGISTRY,
) -> Comparator:
    """``cmp(a, b) -> int`` ordering records of *kind* by *sort_keys*."""
    return comparator(registry.profile(kind), sort_keys)


def sort_records(
    kind: EntityKind | str,
    records: Iterable[T],
    sort_keys: Sequence[SortKey] | None,
    *,
    registry: FieldAccessorRegistry = DEFAULT_REGISTRY,
) -> list[T]:
    """Stable sort: records equal under every key keep their input order."""
    return sorted(records, key=functools.cmp_to_key(build_comparator(kind, sort_keys, registry=registry)))


__all__ = [
    "Comparator",
    "build_comparator",
    "compare_values",
    "comparator",
    "resolve_sort_keys",
    "sort_records",
]
