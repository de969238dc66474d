"""Result types for railway-oriented programming.

Classification of a single class either succeeds with a verdict or fails with
a DomainError. Failures are collected as data and only turned into an
exception once every class has been inspected, so one startup reports every
misconfigured class at once.

Usage:
    def classify(cls: type) -> Result[Classification, DomainError]:
        if is_ambiguous(cls):
            return Failure(error=ClassificationError(...))
        return Success(value=Classification(...))

    match classify(cls):
        case Success(value=verdict):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
