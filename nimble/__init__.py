"""Nimble - convention-driven module and endpoint registration for FastAPI.

Usage:
    from nimble import Endpoint, Module, RootEndpoint
    from nimble import ServiceContainer, register_modules, use_modules

    container = ServiceContainer()
    register_modules(container, packages=["app.features"])

    app = FastAPI()
    use_modules(
        app, container, global_group_factory=lambda app: APIRouter(prefix="/api")
    )
"""

from nimble.application.registry import ModuleRegistry, ModuleRegistryBuilder
from nimble.core.container import ServiceContainer
from nimble.core.exceptions import (
    ModuleConfigurationError,
    ModulesAlreadyBoundError,
    NimbleError,
    ServiceResolutionError,
)
from nimble.domain.enums import BindingPhase, ServiceLifetime
from nimble.domain.modules import Endpoint, Module, RootEndpoint
from nimble.presentation import ModuleBinder, register_modules, use_modules

__all__ = [
    "BindingPhase",
    "Endpoint",
    "Module",
    "ModuleBinder",
    "ModuleConfigurationError",
    "ModuleRegistry",
    "ModuleRegistryBuilder",
    "ModulesAlreadyBoundError",
    "NimbleError",
    "RootEndpoint",
    "ServiceContainer",
    "ServiceLifetime",
    "ServiceResolutionError",
    "register_modules",
    "use_modules",
]
