"""Exceptions raised at the composition and startup boundaries.

Classification and catalog problems travel as DomainError values until the
composition entry point decides they are fatal. Everything here is raised
and never caught inside Nimble: a misconfigured module or endpoint must stop
the application from serving with an incomplete route table.
"""

from collections.abc import Sequence

from nimble.core.errors import DomainError


class NimbleError(Exception):
    """Base exception for module registration and binding."""

    pass


class ModuleConfigurationError(NimbleError):
    """One or more classes could not be catalogued.

    Attributes:
        errors: Every DomainError collected during discovery.
    """

    def __init__(self, errors: Sequence[DomainError]) -> None:
        self.errors: tuple[DomainError, ...] = tuple(errors)
        lines = "\n".join(f"  - {error}" for error in self.errors)
        super().__init__(f"Invalid module configuration:\n{lines}")


class ServiceResolutionError(NimbleError):
    """The instance provider could not build a requested service.

    Attributes:
        error: The underlying ServiceError.
    """

    def __init__(self, error: DomainError) -> None:
        self.error = error
        super().__init__(str(error))


class ModulesAlreadyBoundError(NimbleError):
    """Binding was attempted a second time on the same application."""

    pass
