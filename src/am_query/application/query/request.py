"""Application query – QueryRequest, FilterCriteria, SortKey."""
from __future__ import annotations

import dataclasses
import datetime
from enum import Enum

from am_query.domain.enums import Location


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, text: str | None) -> "SortDirection":
        """Only ``"desc"`` (any case) is descending; everything else is ascending."""
        if text is not None and text.lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


@dataclasses.dataclass(frozen=True)
class SortKey:
    """One (field, direction) pair of a multi-key sort."""

    field: str
    direction: str = SortDirection.ASC.value

    @property
    def descending(self) -> bool:
        return SortDirection.parse(self.direction) is SortDirection.DESC


@dataclasses.dataclass(frozen=True)
class FilterCriteria:
    """Categorical filters; how each dimension applies depends on the entity kind.

    ``states`` and ``categories`` are multi-select: ``None``, empty, or a list
    holding the ``"All"`` sentinel disables the dimension. ``user_type`` is
    single-valued with the ``"all"`` sentinel. ``location`` has no sentinel and
    always applies: it scopes results to the caller's site, and ``None`` matches
    no record.
    """

    states: tuple[str, ...] | None = None
    categories: tuple[str, ...] | None = None
    user_type: str | None = None
    location: Location | None = None


@dataclasses.dataclass(frozen=True)
class QueryRequest:
    """Everything one list request asks of the pipeline.

    ``page_size=None`` means the entity kind's default page size.
    """

    search_term: str | None = None
    filters: FilterCriteria = dataclasses.field(default_factory=FilterCriteria)
    date: datetime.date | None = None
    sort_keys: tuple[SortKey, ...] = ()
    page_number: int = 1
    page_size: int | None = None


__all__ = ["FilterCriteria", "QueryRequest", "SortDirection", "SortKey"]
