"""System endpoint response schemas."""

from pydantic import BaseModel, Field


class RootResponse(BaseModel):
    """Response schema for GET /."""

    message: str = Field(..., description="Application name")
    status: str = Field(..., description="Operational status")
    version: str = Field(..., description="Application version")


class HealthResponse(BaseModel):
    """Response schema for GET /health."""

    status: str = Field(..., description="Health status indicator")
