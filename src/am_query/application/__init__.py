"""Application – list-query use cases (framework-agnostic)."""

from am_query.application.pagination import PagedResult, paginate
from am_query.application.query import (
    FilterCriteria,
    QueryPipeline,
    QueryRequest,
    SortKey,
    build_query_request,
    execute,
)

__all__ = [
    "FilterCriteria",
    "PagedResult",
    "QueryPipeline",
    "QueryRequest",
    "SortKey",
    "build_query_request",
    "execute",
    "paginate",
]
