"""Application query – categorical, location and date filter predicates.

Dimensions combine with AND; entries inside a multi-select dimension combine
with OR. Unrecognised filter values never raise, they just match nothing.

Location is always applied: every list is scoped to the caller's site, so a
criteria without a location selects nothing.
"""
from __future__ import annotations

import datetime
from typing import Any, Iterable

from am_query.application.query.registry import DEFAULT_REGISTRY, EntityProfile, FieldAccessorRegistry, Getter
from am_query.application.query.request import FilterCriteria
from am_query.config.settings import DEFAULT_SETTINGS, QuerySettings
from am_query.domain.enums import EntityKind, LabelledEnum, Location
from am_query.kernel.predicates import NEVER, LambdaPredicate, Predicate, all_of


def as_calendar_day(value: datetime.date | None) -> datetime.date | None:
    """Drop the time of day; ``datetime`` values keep their own timezone's date."""
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def selected_values(values: Iterable[str] | None, sentinel: str) -> list[str] | None:
    """Non-blank entries of a multi-select, or ``None`` when the dimension is off."""
    if values is None:
        return None
    entries = [v for v in values if v is not None and v.strip()]
    if not entries or sentinel in entries:
        return None
    return entries


def location_predicate(getter: Getter, location: Location | None) -> Predicate[Any]:
    return LambdaPredicate(lambda record: getter(record) == location, name="location")


def state_predicate(getter: Getter, enum: type[LabelledEnum], entries: list[str]) -> Predicate[Any]:
    allowed = {member for member in (enum.lookup(e) for e in entries) if member is not None}
    if not allowed:
        return NEVER
    return LambdaPredicate(lambda record: getter(record) in allowed, name="state")


def category_predicate(getter: Getter, entries: list[str]) -> Predicate[Any]:
    allowed = {e.strip().casefold() for e in entries}

    def match(record: Any) -> bool:
        name = getter(record)
        return name is not None and name.strip().casefold() in allowed

    return LambdaPredicate(match, name="category")


def type_predicate(getter: Getter, enum: type[LabelledEnum], value: str) -> Predicate[Any]:
    member = enum.lookup(value)
    if member is None:
        return NEVER
    return LambdaPredicate(lambda record: getter(record) == member, name="type")


def date_predicate(getter: Getter, day: datetime.date) -> Predicate[Any]:
    target = as_calendar_day(day)

    def match(record: Any) -> bool:
        value = as_calendar_day(getter(record))
        return value is not None and value == target

    return LambdaPredicate(match, name="date")


def filter_predicate(
    profile: EntityProfile,
    criteria: FilterCriteria | None,
    date: datetime.date | None = None,
    settings: QuerySettings = DEFAULT_SETTINGS,
) -> Predicate[Any]:
    criteria = criteria or FilterCriteria()
    parts: list[Predicate[Any]] = []

    # location has no sentinel and is never skipped; None matches no located record
    parts.append(location_predicate(profile.location_field, criteria.location))

    states = selected_values(criteria.states, settings.all_sentinel)
    if states is not None and profile.state_field is not None and profile.state_enum is not None:
        parts.append(state_predicate(profile.state_field, profile.state_enum, states))

    categories = selected_values(criteria.categories, settings.all_sentinel)
    if categories is not None and profile.category_field is not None:
        parts.append(category_predicate(profile.category_field, categories))

    user_type = (criteria.user_type or "").strip()
    if (
        user_type
        and user_type.lower() != settings.user_type_all_sentinel.lower()
        and profile.type_field is not None
        and profile.type_enum is not None
    ):
        parts.append(type_predicate(profile.type_field, profile.type_enum, user_type))

    if date is not None and profile.date_field is not None:
        parts.append(date_predicate(profile.date_field, date))

    return all_of(parts)


def build_filter_predicate(
    kind: EntityKind | str,
    filters: FilterCriteria | None,
    date: datetime.date | None = None,
    *,
    registry: FieldAccessorRegistry = DEFAULT_REGISTRY,
) -> Predicate[Any]:
    """Conjunctive predicate over every filter dimension *kind* supports."""
    return filter_predicate(registry.profile(kind), filters, date, registry.settings)


__all__ = [
    "as_calendar_day",
    "build_filter_predicate",
    "category_predicate",
    "date_predicate",
    "filter_predicate",
    "location_predicate",
    "selected_values",
    "state_predicate",
    "type_predicate",
]
