"""Application query – raw request parameter parsing.

Turns the query-string values the list endpoints receive into a validated
:class:`QueryRequest`. The pipeline only ever sees parsed values; malformed
dates and page numbers are rejected here with :class:`ValidationError`.
"""
from __future__ import annotations

import datetime
from typing import Iterable

from am_query.application.query.request import FilterCriteria, QueryRequest, SortDirection, SortKey
from am_query.config.settings import DEFAULT_SETTINGS, QuerySettings
from am_query.domain.enums import Location
from am_query.kernel.errors import ValidationError
from am_query.observability.logging import get_logger

_log = get_logger(__name__)

# Tried in order after ISO-8601.
DATE_FORMATS: tuple[str, ...] = ("%m/%d/%Y", "%Y/%m/%d")


def parse_sort_criteria(sort_by: str | None) -> tuple[SortKey, ...]:
    """Split ``"name:asc,code:desc"`` into ordered :class:`SortKey` pairs.

    A segment without ``:direction`` is ascending. Blank segments are skipped.
    """
    if not sort_by or not sort_by.strip():
        return ()
    keys: list[SortKey] = []
    for segment in sort_by.split(","):
        field, _, direction = segment.partition(":")
        field = field.strip()
        if not field:
            continue
        direction = direction.strip().lower() or SortDirection.ASC.value
        keys.append(SortKey(field, direction))
    return tuple(keys)


def parse_date(text: str | None, *, field: str = "date") -> datetime.date | None:
    """Parse a filter date; ``None`` for blank input.

    Accepts ISO-8601 (``2025-06-03`` or a full timestamp), ``MM/dd/yyyy`` and
    ``yyyy/MM/dd``. Only the calendar day is kept.

    Raises:
        ValidationError: the text is not a date in any accepted format.
    """
    if text is None or not text.strip():
        return None
    raw = text.strip()
    try:
        return datetime.datetime.fromisoformat(raw).date()
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    _log.info("query.date_rejected", field=field, value=raw)
    raise ValidationError(
        "Invalid date format for filtering.",
        errors=[{"field": field, "message": f"'{raw}' is not a valid date"}],
    )


def parse_page_value(value: int | str | None, default: int, *, field: str) -> int:
    """Integer page parameter; *default* when absent."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"Invalid value for {field}.",
            errors=[{"field": field, "message": f"{value!r} is not an integer"}],
            cause=exc,
        ) from exc


def parse_location(value: Location | str | None) -> Location | None:
    if value is None or isinstance(value, Location):
        return value
    location = Location.lookup(value)
    if location is None:
        raise ValidationError(
            "Invalid location.",
            errors=[{"field": "location", "message": f"'{value}' is not a known location"}],
        )
    return location


def _as_tuple(values: Iterable[str] | str | None) -> tuple[str, ...] | None:
    if values is None:
        return None
    if isinstance(values, str):
        return (values,)
    return tuple(values)


def build_query_request(
    *,
    search_term: str | None = None,
    sort_by: str | None = None,
    states: Iterable[str] | str | None = None,
    categories: Iterable[str] | str | None = None,
    user_type: str | None = None,
    location: Location | str | None = None,
    date: str | None = None,
    page_number: int | str | None = None,
    page_size: int | str | None = None,
    settings: QuerySettings = DEFAULT_SETTINGS,
) -> QueryRequest:
    """Assemble a :class:`QueryRequest` from raw endpoint parameters.

    ``page_size`` is capped at ``settings.max_page_size``; values below 1 are
    left for the paginator to clamp.
    """
    size = parse_page_value(page_size, settings.default_page_size, field="pageSize")
    return QueryRequest(
        search_term=search_term,
        filters=FilterCriteria(
            states=_as_tuple(states),
            categories=_as_tuple(categories),
            user_type=user_type,
            location=parse_location(location),
        ),
        date=parse_date(date),
        sort_keys=parse_sort_criteria(sort_by),
        page_number=parse_page_value(page_number, 1, field="pageNumber"),
        page_size=min(size, settings.max_page_size),
    )


__all__ = [
    "DATE_FORMATS",
    "build_query_request",
    "parse_date",
    "parse_location",
    "parse_page_value",
    "parse_sort_criteria",
]
