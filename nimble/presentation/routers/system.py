"""System endpoints registered on the application root.

Root, health and configuration endpoints are not part of any module: they
inherit neither the global API prefix nor any module dependency. They are
intentionally lightweight and side-effect free to support health checks and
basic diagnostics.
"""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from nimble.core.config import Settings
from nimble.domain.modules import RootEndpoint
from nimble.schemas.system_schemas import HealthResponse, RootResponse


class SystemEndpoints(RootEndpoint):
    """GET /, GET /health and GET /config."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def map_endpoint(self, app: FastAPI) -> None:
        app.add_api_route(
            "/",
            self.root,
            methods=["GET"],
            response_model=RootResponse,
            tags=["System"],
        )
        app.add_api_route(
            "/health",
            self.health,
            methods=["GET"],
            response_model=HealthResponse,
            tags=["System"],
        )
        app.add_api_route(
            "/config",
            self.get_config,
            methods=["GET"],
            tags=["System"],
            include_in_schema=False,
        )

    async def root(self) -> RootResponse:
        """Root endpoint - basic status check.

        Returns:
            RootResponse: Application name, status and version.
        """
        return RootResponse(
            message=self._settings.app_name,
            status="operational",
            version=self._settings.app_version,
        )

    async def health(self) -> HealthResponse:
        """Health check endpoint for monitoring and load balancers."""
        return HealthResponse(status="healthy")

    async def get_config(self) -> JSONResponse:
        """Configuration debug endpoint (development only).

        Returns:
            JSONResponse: Routing configuration, or 403 outside development.
        """
        if not self._settings.is_development:
            return JSONResponse(
                status_code=403,
                content={"detail": "Config endpoint only available in development"},
            )

        return JSONResponse(
            content={
                "environment": self._settings.environment.value,
                "debug": self._settings.debug,
                "api_prefix": self._settings.api_prefix,
                "module_packages": self._settings.module_packages,
                "strict_discovery": self._settings.strict_discovery,
            }
        )
