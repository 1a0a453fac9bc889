"""Application pagination – PagedResult and paginate()."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclasses.dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of results with computed navigation properties.

    ``current_page`` is never clamped to ``total_pages``: asking for a page past
    the end yields empty ``items`` with accurate metadata.
    """

    items: list[T]
    total_items: int
    page_size: int
    current_page: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0 or self.total_items <= 0:
            return 0
        return math.ceil(self.total_items / self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.current_page > 1

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size

    def map(self, fn: Callable[[T], U]) -> "PagedResult[U]":
        """Return a new :class:`PagedResult` with each item transformed by *fn*."""
        return PagedResult(
            items=[fn(item) for item in self.items],
            total_items=self.total_items,
            page_size=self.page_size,
            current_page=self.current_page,
        )

    def row_numbers(self, *, descending: bool = False) -> Iterator[int]:
        """Absolute 1-based row number of each item on this page.

        Lists sorted by ``no`` descending number their rows from
        ``total_items`` down, so the first row of page 1 is the last record.
        """
        for idx in range(len(self.items)):
            absolute = self.offset + idx
            yield self.total_items - absolute if descending else absolute + 1

    def to_dict(self, item_serializer: Callable[[T], Any] | None = None) -> dict[str, Any]:
        """Response envelope as returned by the list endpoints."""
        serialize = item_serializer or (lambda item: item)
        return {
            "items": [serialize(item) for item in self.items],
            "paginationMetadata": {
                "pageSize": self.page_size,
                "currentPage": self.current_page,
                "totalPages": self.total_pages,
                "totalItems": self.total_items,
                "hasNextPage": self.has_next_page,
                "hasPreviousPage": self.has_previous_page,
            },
        }


def paginate(source: Iterable[T], page_number: int, page_size: int) -> PagedResult[T]:
    """Slice *source* into the requested page.

    *source* is enumerated exactly once, so lazy iterables are safe. Page
    number and size below 1 are raised to 1.
    """
    page_number = max(1, page_number)
    page_size = max(1, page_size)
    materialized = source if isinstance(source, list) else list(source)
    start = (page_number - 1) * page_size
    return PagedResult(
        items=materialized[start:start + page_size],
        total_items=len(materialized),
        page_size=page_size,
        current_page=page_number,
    )


__all__ = ["PagedResult", "paginate"]
