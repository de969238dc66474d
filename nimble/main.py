"""
Main FastAPI application entry point.

Builds the application the way a host project would use Nimble:
register modules at composition time, create the FastAPI app, then bind
every module under the configured global API prefix.

Run with:
    uvicorn nimble.main:app
"""

from fastapi import APIRouter, FastAPI

from nimble.core.config import Settings, get_settings
from nimble.core.container import ServiceContainer, get_logger
from nimble.domain.protocols import LoggerProtocol
from nimble.presentation.binder import GlobalGroupFactory
from nimble.presentation.installer import register_modules, use_modules


def global_group_factory(api_prefix: str) -> GlobalGroupFactory | None:
    """Factory for the global group modules inherit from.

    Args:
        api_prefix: Normalised prefix ("" disables the global group).

    Returns:
        A factory building ``APIRouter(prefix=api_prefix)``, or None.
    """
    if not api_prefix:
        return None
    return lambda app: APIRouter(prefix=api_prefix)


def create_app(
    settings: Settings | None = None,
    container: ServiceContainer | None = None,
) -> FastAPI:
    """Build the application with every discovered module bound.

    Args:
        settings: Configuration. Defaults to the cached settings.
        container: Instance provider. A fresh container by default.

    Returns:
        FastAPI: Application with its route table complete.
    """
    settings = settings or get_settings()
    container = container or ServiceContainer()
    logger = get_logger()

    container.add_instance(Settings, settings)
    container.add_instance(LoggerProtocol, logger)

    register_modules(
        container,
        packages=settings.module_packages,
        strict=settings.strict_discovery,
        logger=logger,
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    use_modules(
        app,
        container,
        global_group_factory=global_group_factory(settings.api_prefix),
        logger=logger,
    )
    return app


app = create_app()
