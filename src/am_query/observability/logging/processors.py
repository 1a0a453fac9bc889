"""Observability – get_logger helper and query context binding."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally pre-bound with *initial_values*.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def bind_query_context(**values: Any) -> None:
    """Bind request-scoped fields (e.g. ``endpoint``, ``admin_location``).

    Every log event emitted in the current context, including the pipeline's
    ``query.executed`` event, carries these fields until cleared.
    """
    structlog.contextvars.bind_contextvars(**values)


def clear_query_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = ["bind_query_context", "clear_query_context", "get_logger"]
