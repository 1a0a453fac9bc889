"""Observability – logging for the query layer."""
from am_query.observability.logging import JsonLoggerFactory, bind_query_context, clear_query_context, get_logger

__all__ = ["JsonLoggerFactory", "bind_query_context", "clear_query_context", "get_logger"]
