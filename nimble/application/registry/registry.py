"""Module Registry - the catalog binding works from.

ModuleRegistry is built exactly once at composition time and is read-only
afterwards. Binding order is catalog order: modules and their endpoints are
kept in the order they were added to the builder, and discovery adds them
sorted by fully qualified name.

Usage:
    builder = ModuleRegistryBuilder()
    builder.add_module(UsersModule)
    builder.add_endpoint(ListUsers)  # owner read from Endpoint[UsersModule]
    builder.add_root_endpoint(Health)
    registry = builder.build()

    for module in registry.modules():
        registry.endpoints_of(module)
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from nimble.application.registry.metadata import ModuleEntry, RegistryStatistics
from nimble.core.enums import ErrorCode
from nimble.core.errors import ClassificationError, DomainError, MissingModuleError
from nimble.core.exceptions import ModuleConfigurationError
from nimble.domain.modules import (
    Endpoint,
    Module,
    RootEndpoint,
    declared_modules,
    qualified_name,
)


class ModuleRegistry:
    """Immutable catalog of modules, bound endpoints and root endpoints.

    Safe for concurrent readers: nothing mutates it after construction.
    """

    __slots__ = ("_entries", "_unbound", "_owners", "_unresolved")

    def __init__(
        self,
        entries: Mapping[type[Module], ModuleEntry],
        unbound: tuple[type[RootEndpoint], ...] = (),
        unresolved: tuple[MissingModuleError, ...] = (),
    ) -> None:
        self._entries = MappingProxyType(dict(entries))
        self._unbound = tuple(unbound)
        self._unresolved = tuple(unresolved)
        self._owners = MappingProxyType(
            {
                endpoint: entry.module
                for entry in self._entries.values()
                for endpoint in entry.endpoints
            }
        )

    @classmethod
    def empty(cls) -> "ModuleRegistry":
        """Registry with no modules and no endpoints."""
        return cls({})

    @property
    def entries(self) -> Mapping[type[Module], ModuleEntry]:
        """Read-only mapping of module class to its entry, in catalog order."""
        return self._entries

    def __iter__(self) -> Iterator[ModuleEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def modules(self) -> tuple[type[Module], ...]:
        """Module classes in catalog order."""
        return tuple(self._entries)

    def endpoints_of(self, module: type[Module]) -> tuple[type[Endpoint], ...]:
        """Endpoint classes bound to a module (empty for unknown modules)."""
        entry = self._entries.get(module)
        return entry.endpoints if entry is not None else ()

    def unbound_endpoints(self) -> tuple[type[RootEndpoint], ...]:
        """Root endpoint classes in catalog order."""
        return self._unbound

    def owner_of(self, endpoint: type) -> type[Module] | None:
        """Owning module of a catalogued bound endpoint, else None."""
        return self._owners.get(endpoint)

    def unresolved(self) -> tuple[MissingModuleError, ...]:
        """Bound endpoints dropped because their module is not catalogued."""
        return self._unresolved

    def statistics(self) -> RegistryStatistics:
        """Counts of catalogued classes."""
        return RegistryStatistics(
            modules=len(self._entries),
            bound_endpoints=len(self._owners),
            unbound_endpoints=len(self._unbound),
            unresolved_endpoints=len(self._unresolved),
        )


class ModuleRegistryBuilder:
    """Collects modules and endpoints, validates, and builds a ModuleRegistry.

    Every problem is collected and reported together by build().
    Insertion order is preserved and becomes binding order.
    """

    def __init__(self) -> None:
        self._modules: list[type[Module]] = []
        self._bound: dict[type, type[Module]] = {}
        self._unbound: list[type[RootEndpoint]] = []
        self._errors: list[DomainError] = []

    def add_module(self, module: type[Module]) -> "ModuleRegistryBuilder":
        """Add a concrete module class.

        Args:
            module: Module subclass.

        Returns:
            The builder (chainable).
        """
        if not (isinstance(module, type) and issubclass(module, Module)):
            self._errors.append(
                ClassificationError(
                    code=ErrorCode.INVALID_MODULE_TYPE,
                    message=f"{module!r} is not a Module subclass",
                    type_name=repr(module),
                )
            )
        elif module in self._modules:
            self._errors.append(
                ClassificationError(
                    code=ErrorCode.MODULE_DUPLICATE,
                    message=f"{qualified_name(module)} was added more than once",
                    type_name=qualified_name(module),
                    classifications=("module",),
                )
            )
        else:
            self._modules.append(module)
        return self

    def add_endpoint(
        self,
        endpoint: type[Endpoint],
        module: type[Module] | None = None,
    ) -> "ModuleRegistryBuilder":
        """Add a bound endpoint.

        Args:
            endpoint: Endpoint subclass.
            module: Owning module. Read from the Endpoint[...] parameter when
                omitted.

        Returns:
            The builder (chainable).
        """
        if not (isinstance(endpoint, type) and issubclass(endpoint, Endpoint)):
            self._errors.append(
                ClassificationError(
                    code=ErrorCode.INVALID_ENDPOINT_TYPE,
                    message=f"{endpoint!r} is not an Endpoint subclass",
                    type_name=repr(endpoint),
                )
            )
            return self

        name = qualified_name(endpoint)
        owners = declared_modules(endpoint)
        if module is None:
            if len(owners) != 1:
                self._errors.append(_owner_error(name, owners))
                return self
            module = owners[0]
        elif owners and owners != (module,):
            self._errors.append(
                _conflict(
                    name,
                    *(f"endpoint of {qualified_name(o)}" for o in owners),
                    f"endpoint of {qualified_name(module)}",
                )
            )
            return self

        bound_role = f"endpoint of {qualified_name(module)}"
        if issubclass(endpoint, RootEndpoint) or endpoint in self._unbound:
            self._errors.append(_conflict(name, bound_role, "root endpoint"))
            return self

        if issubclass(endpoint, Module):
            self._errors.append(_conflict(name, "module", bound_role))
            return self

        previous = self._bound.get(endpoint)
        if previous is not None and previous is not module:
            self._errors.append(
                _conflict(
                    name,
                    f"endpoint of {qualified_name(previous)}",
                    f"endpoint of {qualified_name(module)}",
                )
            )
            return self

        self._bound[endpoint] = module
        return self

    def add_root_endpoint(
        self, endpoint: type[RootEndpoint]
    ) -> "ModuleRegistryBuilder":
        """Add an unbound (root) endpoint.

        Args:
            endpoint: RootEndpoint subclass.

        Returns:
            The builder (chainable).
        """
        if not (isinstance(endpoint, type) and issubclass(endpoint, RootEndpoint)):
            self._errors.append(
                ClassificationError(
                    code=ErrorCode.INVALID_ENDPOINT_TYPE,
                    message=f"{endpoint!r} is not a RootEndpoint subclass",
                    type_name=repr(endpoint),
                )
            )
        elif endpoint in self._bound:
            name = qualified_name(endpoint)
            owner = qualified_name(self._bound[endpoint])
            self._errors.append(
                _conflict(name, f"endpoint of {owner}", "root endpoint")
            )
        elif endpoint not in self._unbound:
            self._unbound.append(endpoint)
        return self

    def build(self) -> ModuleRegistry:
        """Validate and freeze the catalog.

        Returns:
            The immutable ModuleRegistry.

        Raises:
            ModuleConfigurationError: If any add_* call was rejected.
        """
        if self._errors:
            raise ModuleConfigurationError(self._errors)

        grouped: dict[type[Module], list[type[Endpoint]]] = {
            module: [] for module in self._modules
        }
        unresolved: list[MissingModuleError] = []
        for endpoint, module in self._bound.items():
            if module in grouped:
                grouped[module].append(endpoint)
            else:
                unresolved.append(
                    MissingModuleError(
                        code=ErrorCode.ENDPOINT_MODULE_MISSING,
                        message=(
                            f"{qualified_name(endpoint)} belongs to "
                            f"{qualified_name(module)}, which was not discovered"
                        ),
                        endpoint_name=qualified_name(endpoint),
                        module_name=qualified_name(module),
                    )
                )

        entries = {
            module: ModuleEntry(module=module, endpoints=tuple(endpoints))
            for module, endpoints in grouped.items()
        }
        return ModuleRegistry(
            entries,
            unbound=tuple(self._unbound),
            unresolved=tuple(unresolved),
        )


def _conflict(name: str, *roles: str) -> ClassificationError:
    return ClassificationError(
        code=ErrorCode.AMBIGUOUS_CLASSIFICATION,
        message=f"{name} matches conflicting roles: {', '.join(roles)}",
        type_name=name,
        classifications=roles,
    )


def _owner_error(name: str, owners: tuple[type[Module], ...]) -> ClassificationError:
    if not owners:
        return ClassificationError(
            code=ErrorCode.ENDPOINT_MODULE_UNDECLARED,
            message=f"{name} does not declare its module; pass module= explicitly",
            type_name=name,
            classifications=("endpoint without module",),
        )
    return _conflict(name, *(f"endpoint of {qualified_name(o)}" for o in owners))
