"""Entry points used by a hosting application's startup sequence.

Two calls, in this order:

    container = ServiceContainer()
    register_modules(container)          # composition time, before the app exists

    app = FastAPI()
    use_modules(app, container)          # after the app is built, before serving

register_modules() discovers modules and endpoints (or takes an explicit
catalog), reports endpoints whose module was not discovered, and registers
every catalogued class in the container as a transient service:

    Module          <- each module class
    Endpoint[M]     <- each endpoint class bound to M
    RootEndpoint    <- each root endpoint class

use_modules() runs the ModuleBinder pass once per application.
"""

from collections.abc import Iterable

from fastapi import FastAPI

from nimble.application.discovery import discover, discover_packages
from nimble.application.registry import ModuleRegistry
from nimble.core.config import settings
from nimble.core.container import ServiceContainer, get_logger
from nimble.core.exceptions import ModuleConfigurationError, ModulesAlreadyBoundError
from nimble.domain.enums import ServiceLifetime
from nimble.domain.modules import Module, RootEndpoint, endpoint_contract
from nimble.domain.protocols import LoggerProtocol
from nimble.presentation.binder import GlobalGroupFactory, ModuleBinder

_BINDER_STATE_KEY = "module_binder"


def register_modules(
    container: ServiceContainer,
    *,
    packages: Iterable[str] | None = None,
    types: Iterable[type] | None = None,
    registry: ModuleRegistry | None = None,
    strict: bool | None = None,
    logger: LoggerProtocol | None = None,
) -> ModuleRegistry:
    """Discover modules and endpoints and register them in the container.

    Exactly one source is used, by precedence: ``registry`` (explicit
    catalog), ``types`` (class universe), ``packages`` (scanned), and finally
    ``settings.module_packages``.

    Args:
        container: Instance provider to register into.
        packages: Dotted package names to scan.
        types: Classes to classify instead of scanning.
        registry: Prebuilt catalog (e.g. from ModuleRegistryBuilder).
        strict: Reject endpoints whose module was not discovered. Defaults to
            ``settings.strict_discovery``.
        logger: Structured logger. Defaults to the application logger.

    Returns:
        The immutable catalog, also registered in the container under
        ModuleRegistry.

    Raises:
        ModuleConfigurationError: On ambiguous or undeclared classes, or on
            unresolved endpoints in strict mode.
    """
    logger = logger or get_logger()
    strict = settings.strict_discovery if strict is None else strict

    if registry is None:
        if types is not None:
            registry = discover(types)
        else:
            registry = discover_packages(
                settings.module_packages if packages is None else packages
            )

    unresolved = registry.unresolved()
    if unresolved and strict:
        raise ModuleConfigurationError(unresolved)
    for missing in unresolved:
        logger.warning(
            "Endpoint module not discovered, endpoint skipped",
            endpoint=missing.endpoint_name,
            module=missing.module_name,
        )

    for entry in registry:
        container.register(Module, entry.module, ServiceLifetime.TRANSIENT)
        contract = endpoint_contract(entry.module)
        for endpoint in entry.endpoints:
            container.register(contract, endpoint, ServiceLifetime.TRANSIENT)

    for endpoint in registry.unbound_endpoints():
        container.register(RootEndpoint, endpoint, ServiceLifetime.TRANSIENT)

    container.add_instance(ModuleRegistry, registry)

    stats = registry.statistics()
    logger.info(
        "Modules discovered",
        modules=stats.modules,
        bound_endpoints=stats.bound_endpoints,
        unbound_endpoints=stats.unbound_endpoints,
        unresolved_endpoints=stats.unresolved_endpoints,
    )
    return registry


def use_modules(
    app: FastAPI,
    container: ServiceContainer,
    *,
    global_group_factory: GlobalGroupFactory | None = None,
    logger: LoggerProtocol | None = None,
) -> ModuleBinder:
    """Bind every registered module and endpoint to the application.

    Call after register_modules() and after the FastAPI app is created, before
    it starts serving.

    Args:
        app: Root application.
        container: Container passed to register_modules().
        global_group_factory: Optional factory for a group every module
            inherits from (e.g. ``lambda app: APIRouter(prefix="/api")``).
            Called exactly once.
        logger: Structured logger. Defaults to the application logger.

    Returns:
        The ModuleBinder, in phase DONE.

    Raises:
        ModulesAlreadyBoundError: If modules were already bound to this app.
    """
    if getattr(app.state, _BINDER_STATE_KEY, None) is not None:
        raise ModulesAlreadyBoundError("Modules already bound to this application")

    if container.is_registered(ModuleRegistry):
        registry = container.resolve(ModuleRegistry)
    else:
        registry = ModuleRegistry.empty()

    binder = ModuleBinder(registry, container, logger or get_logger())
    setattr(app.state, _BINDER_STATE_KEY, binder)
    binder.bind(app, global_group_factory)
    return binder
