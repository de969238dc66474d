"""Module and endpoint contracts implemented by application code."""

from nimble.domain.modules.endpoint import (
    Endpoint,
    RootEndpoint,
    TModule,
    endpoint_contract,
)
from nimble.domain.modules.module import Module
from nimble.domain.modules.ownership import declared_modules, qualified_name

__all__ = [
    "Endpoint",
    "Module",
    "RootEndpoint",
    "TModule",
    "endpoint_contract",
    "declared_modules",
    "qualified_name",
]
