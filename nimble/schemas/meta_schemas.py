"""Module catalog response schemas.

Pydantic models describing the registry exposed by the meta endpoints.

Endpoints:
    GET    /api/meta/modules    - List catalogued modules and endpoints
"""

from pydantic import BaseModel, Field


class ModuleSummary(BaseModel):
    """One catalogued module with its bound endpoints."""

    name: str = Field(..., description="Fully qualified module class name")
    endpoints: list[str] = Field(
        default_factory=list,
        description="Fully qualified endpoint class names, in binding order",
    )


class RegistryStatisticsResponse(BaseModel):
    """Catalog counts."""

    modules: int = Field(..., description="Catalogued modules")
    bound_endpoints: int = Field(..., description="Endpoints bound to a module")
    unbound_endpoints: int = Field(..., description="Root endpoints")
    unresolved_endpoints: int = Field(
        ...,
        description="Endpoints skipped because their module was not discovered",
    )


class ModuleCatalogResponse(BaseModel):
    """Response schema for GET /meta/modules."""

    modules: list[ModuleSummary] = Field(..., description="Modules in binding order")
    unbound_endpoints: list[str] = Field(
        default_factory=list,
        description="Root endpoint class names, in binding order",
    )
    statistics: RegistryStatisticsResponse
