"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   └── UnknownEntityKindError
    └── ApplicationError         (application.py)
        └── ConfigError          (am_query.config.validation)
"""

from am_query.kernel.errors.application import ApplicationError
from am_query.kernel.errors.base import BaseError
from am_query.kernel.errors.domain import (
    DomainError,
    UnknownEntityKindError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "UnknownEntityKindError",
    "ValidationError",
]
