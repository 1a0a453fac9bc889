"""Kernel – errors and composable predicates shared by every layer."""

from am_query.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    UnknownEntityKindError,
    ValidationError,
)
from am_query.kernel.predicates import ALWAYS, NEVER, LambdaPredicate, Predicate, all_of, any_of

__all__ = [
    "ALWAYS",
    "NEVER",
    "ApplicationError",
    "BaseError",
    "DomainError",
    "LambdaPredicate",
    "Predicate",
    "UnknownEntityKindError",
    "ValidationError",
    "all_of",
    "any_of",
]
