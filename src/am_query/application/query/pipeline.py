"""Application query – QueryPipeline orchestrator.

Stage order is fixed: search → filter → sort → paginate. Sorting always runs
before slicing so each page is a window onto one total order.
"""
from __future__ import annotations

import functools
from typing import Iterable, TypeVar

from am_query.application.pagination import PagedResult, paginate
from am_query.application.query.filters import filter_predicate
from am_query.application.query.ordering import comparator
from am_query.application.query.registry import DEFAULT_REGISTRY, FieldAccessorRegistry
from am_query.application.query.request import QueryRequest
from am_query.application.query.search import search_predicate
from am_query.domain.enums import EntityKind
from am_query.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


class QueryPipeline:
    """Stateless list-query engine over in-memory record snapshots.

    One instance may serve any number of concurrent calls; it holds only the
    read-only registry.
    """

    def __init__(self, registry: FieldAccessorRegistry = DEFAULT_REGISTRY) -> None:
        self._registry = registry

    @property
    def registry(self) -> FieldAccessorRegistry:
        return self._registry

    def select(self, kind: EntityKind | str, source: Iterable[T], request: QueryRequest | None = None) -> list[T]:
        """Search, filter and sort *source*; every match in final order."""
        request = request or QueryRequest()
        profile = self._registry.profile(kind)

        keep = search_predicate(profile, request.search_term) & filter_predicate(
            profile, request.filters, request.date, self._registry.settings
        )
        matched = [record for record in source if keep(record)]
        matched.sort(key=functools.cmp_to_key(comparator(profile, request.sort_keys)))
        return matched

    def execute(self, kind: EntityKind | str, source: Iterable[T], request: QueryRequest | None = None) -> PagedResult[T]:
        request = request or QueryRequest()
        profile = self._registry.profile(kind)
        matched = self.select(profile.kind, source, request)

        page_size = request.page_size if request.page_size is not None else profile.default_page_size
        result = paginate(matched, request.page_number, page_size)

        _log.debug(
            "query.executed",
            kind=profile.kind.value,
            total_items=result.total_items,
            page=result.current_page,
            page_size=result.page_size,
            sort=[f"{k.field}:{k.direction}" for k in request.sort_keys],
        )
        return result


DEFAULT_PIPELINE = QueryPipeline()


def execute(kind: EntityKind | str, source: Iterable[T], request: QueryRequest | None = None) -> PagedResult[T]:
    """Run the default pipeline; see :meth:`QueryPipeline.execute`."""
    return DEFAULT_PIPELINE.execute(kind, source, request)


__all__ = ["DEFAULT_PIPELINE", "QueryPipeline", "execute"]
