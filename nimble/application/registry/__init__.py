"""Module registry: the immutable catalog built at composition time."""

from nimble.application.registry.metadata import ModuleEntry, RegistryStatistics
from nimble.application.registry.registry import (
    ModuleRegistry,
    ModuleRegistryBuilder,
)

__all__ = [
    "ModuleEntry",
    "ModuleRegistry",
    "ModuleRegistryBuilder",
    "RegistryStatistics",
]
