"""Application-layer errors – wiring and configuration problems."""

from __future__ import annotations

from am_query.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Problem in how the library is set up rather than in a request."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
