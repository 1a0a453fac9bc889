"""Observability – structured logging helpers."""
from am_query.observability.logging.factory import JsonLoggerFactory
from am_query.observability.logging.processors import bind_query_context, clear_query_context, get_logger

__all__ = ["JsonLoggerFactory", "bind_query_context", "clear_query_context", "get_logger"]
