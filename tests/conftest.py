"""Shared pytest configuration and fixtures.

Fixtures here are deliberately small: a fresh ServiceContainer and a mocked
structured logger. Discovery tests scan the importable packages under
tests/fixtures instead of defining classes inline, so classification sees
real module boundaries.
"""

from unittest.mock import MagicMock

import pytest

from nimble.core.container import ServiceContainer


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests binding a real FastAPI app"
    )
    config.addinivalue_line("markers", "api: HTTP tests through TestClient")


@pytest.fixture
def container() -> ServiceContainer:
    """Provide an empty service container."""
    return ServiceContainer()


@pytest.fixture
def mock_logger() -> MagicMock:
    """Provide a mock logger implementing LoggerProtocol."""
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.critical = MagicMock()
    return logger
