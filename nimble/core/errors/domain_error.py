"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every registration error. Errors flow
through discovery as data (Result types); the composition and startup
boundaries wrap them into exceptions (see nimble.core.exceptions).

Usage:
    from nimble.core.errors import DomainError
    from nimble.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from nimble.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable error message.
        details: Optional context for debugging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
