"""Discovery - classify a class universe into a ModuleRegistry.

Single pass over the universe: every class is classified (see classifier)
and fed into a ModuleRegistryBuilder. Classes are visited sorted by fully
qualified name so that the catalog, and therefore binding order and log
output, is stable across runs.

No modules and no endpoints is a valid, empty result. Classification
failures are collected and raised together.
"""

from collections.abc import Iterable

from nimble.application.discovery.classifier import classify
from nimble.application.discovery.scanner import collect_types
from nimble.application.registry.registry import (
    ModuleRegistry,
    ModuleRegistryBuilder,
)
from nimble.core.errors import DomainError
from nimble.core.exceptions import ModuleConfigurationError
from nimble.core.result import Failure, Success
from nimble.domain.enums import EndpointKind
from nimble.domain.modules import qualified_name


def discover(types: Iterable[type]) -> ModuleRegistry:
    """Classify classes and build the catalog.

    Args:
        types: Class universe. Non-classes and duplicates are ignored.

    Returns:
        The immutable ModuleRegistry.

    Raises:
        ModuleConfigurationError: If any class is ambiguous or declares no
            module.
    """
    universe = sorted(
        dict.fromkeys(t for t in types if isinstance(t, type)),
        key=qualified_name,
    )

    builder = ModuleRegistryBuilder()
    errors: list[DomainError] = []

    for cls in universe:
        match classify(cls):
            case Failure(error=error):
                errors.append(error)
            case Success(value=verdict):
                match verdict.kind:
                    case EndpointKind.MODULE:
                        builder.add_module(cls)
                    case EndpointKind.BOUND:
                        builder.add_endpoint(cls, verdict.owner)
                    case EndpointKind.UNBOUND:
                        builder.add_root_endpoint(cls)
                    case EndpointKind.IRRELEVANT:
                        pass

    if errors:
        raise ModuleConfigurationError(errors)

    return builder.build()


def discover_packages(packages: Iterable[str]) -> ModuleRegistry:
    """Scan packages and build the catalog.

    Args:
        packages: Dotted package names imported recursively.

    Returns:
        The immutable ModuleRegistry.
    """
    return discover(collect_types(packages))
