"""Error classes produced while classifying and cataloguing classes.

Error Types:
- ClassificationError: A class cannot be given exactly one role
- MissingModuleError: A bound endpoint names a module that was not discovered
- ServiceError: The instance provider cannot satisfy a request

Usage:
    from nimble.core.errors import ClassificationError
    from nimble.core.enums import ErrorCode
    from nimble.core.result import Failure

    return Failure(error=ClassificationError(
        code=ErrorCode.AMBIGUOUS_CLASSIFICATION,
        message="UsersList declares more than one module",
        type_name="app.users.UsersList",
        classifications=("endpoint of UsersModule", "endpoint of AdminModule"),
    ))
"""

from dataclasses import dataclass

from nimble.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ClassificationError(DomainError):
    """A class satisfies conflicting (or incomplete) role predicates.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        type_name: Fully qualified name of the offending class.
        classifications: The conflicting roles the class matched.
        details: Additional context.
    """

    type_name: str
    classifications: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class MissingModuleError(DomainError):
    """Bound endpoint whose declared module was never discovered.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        endpoint_name: Fully qualified name of the endpoint class.
        module_name: Fully qualified name of the declared module class.
        details: Additional context.
    """

    endpoint_name: str
    module_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ServiceError(DomainError):
    """Instance provider failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        contract_name: Contract that was requested or registered.
        details: Additional context.
    """

    contract_name: str
