"""Module binder - the one-shot pass that puts discovered routes on the app.

For every module, in registry order, the binder derives the module's group
from the global group (or the application), lets each bound endpoint
register on it, then mounts the group on its parent. Root endpoints register
on the application last.

FastAPI copies routes when a router is included, so mounting always happens
after the endpoints of a group have registered, and the global group is
mounted after every module group.

Failures are never caught: an exception from the instance provider or from a
map_group / map_endpoint callback propagates out of bind() and aborts
startup. The binder keeps the phase it failed in and cannot be re-run.
"""

from collections.abc import Callable
from contextlib import suppress
from typing import Any

from fastapi import APIRouter, FastAPI

from nimble.application.registry import ModuleRegistry
from nimble.core.enums import ErrorCode
from nimble.core.errors import ServiceError
from nimble.core.exceptions import ModulesAlreadyBoundError, ServiceResolutionError
from nimble.domain.enums import BindingPhase
from nimble.domain.modules import (
    Module,
    RootEndpoint,
    endpoint_contract,
    qualified_name,
)
from nimble.domain.protocols import InstanceProviderProtocol, LoggerProtocol

type RouteParent = FastAPI | APIRouter
type GlobalGroupFactory = Callable[[FastAPI], APIRouter]


class ModuleBinder:
    """Runs the binding pass exactly once.

    Args:
        registry: Catalog built at composition time.
        provider: Instance provider the catalog was registered into.
        logger: Structured logger. Logging failures never affect binding.
    """

    def __init__(
        self,
        registry: ModuleRegistry,
        provider: InstanceProviderProtocol,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._registry = registry
        self._provider = provider
        self._logger = logger
        self._phase = BindingPhase.NOT_STARTED

    @property
    def phase(self) -> BindingPhase:
        """Current state machine phase."""
        return self._phase

    @property
    def registry(self) -> ModuleRegistry:
        """Catalog this binder works from."""
        return self._registry

    def bind(
        self,
        app: FastAPI,
        global_group_factory: GlobalGroupFactory | None = None,
    ) -> None:
        """Derive module groups and invoke every registration callback.

        Args:
            app: Root application. Root endpoints always register here.
            global_group_factory: Called once with the app; its group becomes
                the parent of every module group.

        Raises:
            ModulesAlreadyBoundError: If bind() already ran (successfully or
                not).
        """
        if self._phase is not BindingPhase.NOT_STARTED:
            raise ModulesAlreadyBoundError(
                f"Modules already bound (binder phase: {self._phase.value})"
            )
        self._phase = BindingPhase.DERIVING_SCOPES

        try:
            self._bind(app, global_group_factory)
        except Exception as error:
            self._log(
                "error",
                "Module binding failed",
                error=error,
                phase=self._phase.value,
            )
            raise

        self._phase = BindingPhase.DONE
        stats = self._registry.statistics()
        self._log(
            "info",
            "Modules bound",
            modules=stats.modules,
            bound_endpoints=stats.bound_endpoints,
            unbound_endpoints=stats.unbound_endpoints,
        )

    def _bind(
        self,
        app: FastAPI,
        global_group_factory: GlobalGroupFactory | None,
    ) -> None:
        global_group = global_group_factory(app) if global_group_factory else None
        parent: RouteParent = app if global_group is None else global_group

        modules = self._catalogued_modules()
        for module in modules:
            self._log("debug", "Found module", module=qualified_name(type(module)))

        for module in modules:
            self._phase = BindingPhase.DERIVING_SCOPES
            group = module.map_group(parent)

            self._phase = BindingPhase.REGISTERING_BOUND
            contract = endpoint_contract(type(module))
            for endpoint in self._provider.resolve_all(contract):
                endpoint.map_endpoint(group)

            if group is not parent:
                parent.include_router(group)

        if global_group is not None and global_group is not app:
            app.include_router(global_group)

        self._phase = BindingPhase.REGISTERING_UNBOUND
        root_endpoints: list[RootEndpoint] = self._provider.resolve_all(RootEndpoint)
        for endpoint in root_endpoints:
            endpoint.map_endpoint(app)

    def _catalogued_modules(self) -> list[Module]:
        """Module instances in registry order.

        Instances whose class is not in the registry are ignored. A registry
        module the provider cannot supply is a resolution failure.
        """
        provided = {type(m): m for m in self._provider.resolve_all(Module)}

        modules: list[Module] = []
        for module_type in self._registry.modules():
            instance = provided.get(module_type)
            if instance is None:
                name = qualified_name(module_type)
                raise ServiceResolutionError(
                    ServiceError(
                        code=ErrorCode.SERVICE_NOT_REGISTERED,
                        message=f"No Module instance provided for {name}",
                        contract_name=name,
                    )
                )
            modules.append(instance)
        return modules

    def _log(self, level: str, message: str, **context: Any) -> None:
        if self._logger is None:
            return
        with suppress(Exception):
            getattr(self._logger, level)(message, **context)
