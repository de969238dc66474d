"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Error classes and error codes for registration failures
- Exceptions raised at the composition and startup boundaries
"""

from nimble.core.enums import ErrorCode
from nimble.core.errors import (
    ClassificationError,
    DomainError,
    MissingModuleError,
    ServiceError,
)
from nimble.core.exceptions import (
    ModuleConfigurationError,
    ModulesAlreadyBoundError,
    NimbleError,
    ServiceResolutionError,
)
from nimble.core.result import Failure, Result, Success

__all__ = [
    "ClassificationError",
    "DomainError",
    "ErrorCode",
    "Failure",
    "MissingModuleError",
    "ModuleConfigurationError",
    "ModulesAlreadyBoundError",
    "NimbleError",
    "Result",
    "ServiceError",
    "ServiceResolutionError",
    "Success",
]
