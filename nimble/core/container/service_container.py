"""Service container - constructs discovered modules and endpoints.

Registrations are keyed by contract (a class, or a parameterised alias such
as ``Endpoint[UsersModule]``). Constructors are auto-wired from their
``__init__`` type hints: every annotated parameter whose type is itself a
registered contract is resolved recursively.

Architecture:
- Uses Python's inspect module to analyze constructor signatures
- Registration order is preserved per contract (resolve_all ordering)
- Transient registrations build a new instance per resolution
- Singleton registrations build once per container

Usage:
    from nimble.core.container import ServiceContainer

    container = ServiceContainer()
    container.add_instance(LoggerProtocol, get_logger())
    container.register(Module, UsersModule)

    modules = container.resolve_all(Module)
"""

import inspect
from collections.abc import Hashable
from dataclasses import dataclass, field
from types import UnionType
from typing import Any, Union, get_args, get_origin, get_type_hints

from nimble.core.enums import ErrorCode
from nimble.core.errors import ServiceError
from nimble.core.exceptions import ServiceResolutionError
from nimble.domain.enums import ServiceLifetime

_MISSING = object()


@dataclass(eq=False, kw_only=True)
class _Registration:
    """One concrete class (or prebuilt instance) registered for a contract."""

    concrete: type | None
    lifetime: ServiceLifetime
    instance: Any = field(default=_MISSING)


def contract_name(contract: Hashable) -> str:
    """Readable name for a contract (class or generic alias).

    Args:
        contract: Registration key.

    Returns:
        Fully qualified class name, or the alias repr for generic aliases.
    """
    if isinstance(contract, type):
        return f"{contract.__module__}.{contract.__qualname__}"
    return repr(contract)


def analyze_constructor(concrete: type) -> dict[str, tuple[Any, bool]]:
    """Analyze a class constructor to discover its dependencies.

    Args:
        concrete: Class to analyze.

    Returns:
        Dict mapping parameter names to ``(annotation, has_default)``.
        Unannotated parameters map to ``inspect.Parameter.empty``.
    """
    init_method = concrete.__init__
    if init_method is object.__init__:
        return {}

    try:
        # Resolves string annotations and forward references
        hints = get_type_hints(init_method)
    except Exception:
        hints = {}

    dependencies: dict[str, tuple[Any, bool]] = {}
    for name, param in inspect.signature(init_method).parameters.items():
        if name == "self" or param.kind in (
            inspect.Parameter.VAR_POSITIONAL,
            inspect.Parameter.VAR_KEYWORD,
        ):
            continue
        annotation = hints.get(name, param.annotation)
        dependencies[name] = (annotation, param.default is not inspect.Parameter.empty)

    return dependencies


class ServiceContainer:
    """Minimal instance provider with constructor injection.

    Implements InstanceProviderProtocol structurally.
    """

    def __init__(self) -> None:
        self._registrations: dict[Hashable, list[_Registration]] = {}
        self._resolving: list[type] = []

    def register(
        self,
        contract: Hashable,
        concrete: type,
        lifetime: ServiceLifetime = ServiceLifetime.TRANSIENT,
    ) -> None:
        """Register a concrete class under a contract.

        Args:
            contract: Lookup key.
            concrete: Class instantiated on resolution.
            lifetime: Instance lifetime.

        Raises:
            ServiceResolutionError: If concrete is not an instantiable class.
        """
        if not isinstance(concrete, type) or inspect.isabstract(concrete):
            raise ServiceResolutionError(
                ServiceError(
                    code=ErrorCode.SERVICE_INVALID_REGISTRATION,
                    message=f"{concrete!r} is not a concrete class",
                    contract_name=contract_name(contract),
                )
            )
        self._registrations.setdefault(contract, []).append(
            _Registration(concrete=concrete, lifetime=lifetime)
        )

    def add_instance(self, contract: Hashable, instance: Any) -> None:
        """Register a prebuilt instance (always singleton).

        Args:
            contract: Lookup key.
            instance: Object returned on every resolution.
        """
        self._registrations.setdefault(contract, []).append(
            _Registration(
                concrete=None,
                lifetime=ServiceLifetime.SINGLETON,
                instance=instance,
            )
        )

    def is_registered(self, contract: Hashable) -> bool:
        """Check whether at least one registration exists for a contract."""
        return bool(self._registrations.get(contract))

    def registrations(self, contract: Hashable) -> tuple[type, ...]:
        """Concrete classes registered for a contract, in registration order.

        Prebuilt instances are reported by their runtime class.
        """
        return tuple(
            reg.concrete if reg.concrete is not None else type(reg.instance)
            for reg in self._registrations.get(contract, [])
        )

    def resolve(self, contract: Hashable) -> Any:
        """Resolve the most recent registration of a contract.

        Args:
            contract: Lookup key.

        Returns:
            Instance built (or cached) for the last registration.

        Raises:
            ServiceResolutionError: If the contract is not registered or a
                constructor dependency cannot be satisfied.
        """
        registrations = self._registrations.get(contract)
        if not registrations:
            raise ServiceResolutionError(
                ServiceError(
                    code=ErrorCode.SERVICE_NOT_REGISTERED,
                    message=f"No service registered for {contract_name(contract)}",
                    contract_name=contract_name(contract),
                )
            )
        return self._build(contract, registrations[-1])

    def resolve_all(self, contract: Hashable) -> list[Any]:
        """Resolve every registration of a contract in registration order.

        Args:
            contract: Lookup key.

        Returns:
            One instance per registration; empty list when unregistered.

        Raises:
            ServiceResolutionError: If a constructor dependency cannot be
                satisfied.
        """
        return [
            self._build(contract, registration)
            for registration in self._registrations.get(contract, [])
        ]

    def _build(self, contract: Hashable, registration: _Registration) -> Any:
        if registration.instance is not _MISSING:
            return registration.instance

        concrete = registration.concrete
        assert concrete is not None

        if concrete in self._resolving:
            cycle = " -> ".join(c.__qualname__ for c in [*self._resolving, concrete])
            raise ServiceResolutionError(
                ServiceError(
                    code=ErrorCode.SERVICE_DEPENDENCY_UNRESOLVED,
                    message=f"Circular dependency: {cycle}",
                    contract_name=contract_name(contract),
                )
            )

        self._resolving.append(concrete)
        try:
            kwargs = self._resolve_arguments(contract, concrete)
        finally:
            self._resolving.pop()

        # Constructor errors propagate unchanged
        instance = concrete(**kwargs)

        if registration.lifetime == ServiceLifetime.SINGLETON:
            registration.instance = instance
        return instance

    def _resolve_arguments(self, contract: Hashable, concrete: type) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        for name, (annotation, has_default) in analyze_constructor(concrete).items():
            dependency = self._find_contract(annotation)
            if dependency is not None:
                kwargs[name] = self.resolve(dependency)
            elif _is_optional(annotation) and not has_default:
                kwargs[name] = None
            elif not has_default:
                raise ServiceResolutionError(
                    ServiceError(
                        code=ErrorCode.SERVICE_DEPENDENCY_UNRESOLVED,
                        message=(
                            f"Cannot resolve parameter '{name}' of "
                            f"{concrete.__qualname__}: "
                            f"no service registered for {_annotation_name(annotation)}"
                        ),
                        contract_name=contract_name(contract),
                        details={"parameter": name},
                    )
                )
        return kwargs

    def _find_contract(self, annotation: Any) -> Hashable | None:
        if annotation is inspect.Parameter.empty:
            return None
        if self._is_hashable_contract(annotation) and self.is_registered(annotation):
            return annotation

        # Optional[X] / X | None: try the non-None member
        if get_origin(annotation) in (Union, UnionType):
            for arg in get_args(annotation):
                if arg is not type(None) and self._find_contract(arg) is not None:
                    return arg
        return None

    @staticmethod
    def _is_hashable_contract(annotation: Any) -> bool:
        try:
            hash(annotation)
        except TypeError:
            return False
        return True


def _is_optional(annotation: Any) -> bool:
    return get_origin(annotation) in (Union, UnionType) and type(None) in get_args(
        annotation
    )


def _annotation_name(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty:
        return "<unannotated>"
    return contract_name(annotation)
