"""Presentation layer: binding discovered modules onto FastAPI."""

from nimble.presentation.binder import GlobalGroupFactory, ModuleBinder, RouteParent
from nimble.presentation.installer import register_modules, use_modules

__all__ = [
    "GlobalGroupFactory",
    "ModuleBinder",
    "RouteParent",
    "register_modules",
    "use_modules",
]
