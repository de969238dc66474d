"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from nimble.core.errors import DomainError, ClassificationError
"""

from nimble.core.errors.domain_error import DomainError
from nimble.core.errors.registration_errors import (
    ClassificationError,
    MissingModuleError,
    ServiceError,
)

__all__ = [
    "DomainError",
    "ClassificationError",
    "MissingModuleError",
    "ServiceError",
]
