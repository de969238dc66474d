"""Meta module - exposes the module catalog for diagnostics.

    GET {api_prefix}/meta/modules
"""

from fastapi import APIRouter

from nimble.application.registry import ModuleRegistry
from nimble.domain.modules import Endpoint, Module, qualified_name
from nimble.presentation.binder import RouteParent
from nimble.schemas.meta_schemas import (
    ModuleCatalogResponse,
    ModuleSummary,
    RegistryStatisticsResponse,
)


class MetaModule(Module):
    """Groups catalog diagnostics under /meta."""

    def map_group(self, parent: RouteParent) -> APIRouter:
        return APIRouter(prefix="/meta", tags=["Meta"])


class ListModules(Endpoint[MetaModule]):
    """GET /meta/modules."""

    def __init__(self, registry: ModuleRegistry) -> None:
        self._registry = registry

    def map_endpoint(self, group: APIRouter) -> None:
        group.add_api_route(
            "/modules",
            self.list_modules,
            methods=["GET"],
            response_model=ModuleCatalogResponse,
            summary="List modules",
            description="Modules and endpoints discovered at startup.",
        )

    async def list_modules(self) -> ModuleCatalogResponse:
        stats = self._registry.statistics()
        return ModuleCatalogResponse(
            modules=[
                ModuleSummary(
                    name=qualified_name(entry.module),
                    endpoints=[qualified_name(e) for e in entry.endpoints],
                )
                for entry in self._registry
            ],
            unbound_endpoints=[
                qualified_name(e) for e in self._registry.unbound_endpoints()
            ],
            statistics=RegistryStatisticsResponse(
                modules=stats.modules,
                bound_endpoints=stats.bound_endpoints,
                unbound_endpoints=stats.unbound_endpoints,
                unresolved_endpoints=stats.unresolved_endpoints,
            ),
        )
