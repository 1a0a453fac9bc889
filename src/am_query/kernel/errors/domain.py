"""Domain errors – rejected query input and unknown record kinds."""

from __future__ import annotations

from typing import Any

from am_query.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when input violates a rule of the query domain."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A raw request parameter could not be parsed.

    ``errors`` holds one ``{"field": ..., "message": ...}`` entry per
    offending parameter.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class UnknownEntityKindError(DomainError):
    """No query profile is registered for the requested record kind."""

    default_code = "unknown_entity_kind"

    def __init__(self, kind: Any, **kwargs: Any) -> None:
        super().__init__(f"Unknown entity kind '{kind}'", **kwargs)
        self.kind = kind


__all__ = ["DomainError", "UnknownEntityKindError", "ValidationError"]
