"""
am_query – list-query pipeline for the asset tracking application.

Import path convention::

    from am_query.application.query import QueryPipeline, QueryRequest, SortKey
    from am_query.application.pagination import PagedResult, paginate
    from am_query.domain import Asset, EntityKind
    from am_query.kernel.errors import ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
