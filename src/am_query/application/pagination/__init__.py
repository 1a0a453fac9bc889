"""Application pagination – page slicing and metadata."""
from am_query.application.pagination.page import PagedResult, paginate

__all__ = ["PagedResult", "paginate"]
