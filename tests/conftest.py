"""Pytest configuration shared by unit and integration tests.

Provides:
1. Marker registration and automatic asyncio marking
2. A Settings factory that never reads secrets from the environment
3. In-memory collaborators for handler tests (see tests/fakes.py)
"""

import inspect
from unittest.mock import Mock

import pytest

from tasker.core.config import Settings
from tasker.core.enums import Environment
from tasker.infrastructure.security import JWTService, RefreshTokenService

TEST_SECRET_KEY = "test-secret-key-that-is-long-enough-for-hs256"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real adapters"
    )
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


def pytest_collection_modifyitems(config, items):
    """Add the asyncio marker to async test functions.

    ``asyncio_mode = "auto"`` in pyproject.toml is what runs them; the
    marker keeps ``-m asyncio`` selection working.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


def make_settings(**overrides) -> Settings:
    """Build Settings for tests with safe defaults.

    Usage:
        settings = make_settings(critical_event_sink="log")
    """
    values = {
        "environment": Environment.TESTING,
        "database_url": "sqlite+aiosqlite:///:memory:",
        "redis_url": "redis://localhost:6379/0",
        "jwt_secret_key": TEST_SECRET_KEY,
        "bcrypt_rounds": 10,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double whose ``bind`` returns itself so calls are observable."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(
        secret_key=TEST_SECRET_KEY,
        issuer="Tasker",
        audience="TaskerClient",
        expiration_minutes=15,
    )


@pytest.fixture
def refresh_token_service() -> RefreshTokenService:
    return RefreshTokenService(expiration_days=14)
