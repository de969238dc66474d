"""Module registry metadata types.

Design Principles:
- Immutable (frozen=True) - registry entries never change after composition
- Type-safe (kw_only=True) - explicit field assignment
"""

from dataclasses import dataclass

from nimble.domain.modules import Endpoint, Module


@dataclass(frozen=True, kw_only=True)
class ModuleEntry:
    """One module and the endpoints bound to it.

    Attributes:
        module: Concrete module class.
        endpoints: Bound endpoint classes in binding order. May be empty.

    Example:
        >>> ModuleEntry(module=UsersModule, endpoints=(ListUsers, CreateUser))
    """

    module: type[Module]
    endpoints: tuple[type[Endpoint], ...] = ()


@dataclass(frozen=True, kw_only=True)
class RegistryStatistics:
    """Counts reported at startup.

    Attributes:
        modules: Number of catalogued modules.
        bound_endpoints: Endpoints bound to a catalogued module.
        unbound_endpoints: Root endpoints.
        unresolved_endpoints: Bound endpoints dropped because their module
            was not catalogued.
    """

    modules: int
    bound_endpoints: int
    unbound_endpoints: int
    unresolved_endpoints: int
