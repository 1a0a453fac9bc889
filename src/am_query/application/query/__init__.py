"""Application query – search, filter, multi-key sort and paginate list queries."""
from am_query.application.query.filters import build_filter_predicate
from am_query.application.query.ordering import build_comparator, compare_values, sort_records
from am_query.application.query.params import (
    build_query_request,
    parse_date,
    parse_page_value,
    parse_sort_criteria,
)
from am_query.application.query.pipeline import DEFAULT_PIPELINE, QueryPipeline, execute
from am_query.application.query.registry import (
    DEFAULT_REGISTRY,
    EntityProfile,
    FieldAccessor,
    FieldAccessorRegistry,
    resolve,
)
from am_query.application.query.request import FilterCriteria, QueryRequest, SortDirection, SortKey
from am_query.application.query.search import build_search_predicate

__all__ = [
    "DEFAULT_PIPELINE",
    "DEFAULT_REGISTRY",
    "EntityProfile",
    "FieldAccessor",
    "FieldAccessorRegistry",
    "FilterCriteria",
    "QueryPipeline",
    "QueryRequest",
    "SortDirection",
    "SortKey",
    "build_comparator",
    "build_filter_predicate",
    "build_query_request",
    "build_search_predicate",
    "compare_values",
    "execute",
    "parse_date",
    "parse_page_value",
    "parse_sort_criteria",
    "resolve",
    "sort_records",
]
