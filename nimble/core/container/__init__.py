"""Container module - dependency injection.

- infrastructure: application-scoped singletons (logging)
- service_container: the instance provider used for modules and endpoints

Usage:
    from nimble.core.container import ServiceContainer, get_logger
"""

from nimble.core.container.infrastructure import get_logger
from nimble.core.container.service_container import (
    ServiceContainer,
    analyze_constructor,
    contract_name,
)

__all__ = [
    "ServiceContainer",
    "analyze_constructor",
    "contract_name",
    "get_logger",
]
