"""
Shared pytest fixtures for user-api tests.
"""
import logging
import os
from unittest.mock import AsyncMock, patch

import pytest

from app.core.config import Settings
from app.di.base_container import BaseContainer
from app.di.providers.logging_provider import LoggingProvider, USERS_LOGGER_NAME
from app.di.providers.user_provider import UserProvider
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_api",
        "LOG_LEVEL": "DEBUG",
        "LOG_FORMAT": "text",
        "EXPOSE_INTERNAL_ERRORS": "false",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def settings(mock_env):
    return Settings()


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def container(settings, mock_user_repo):
    """Container wired like DIContainer, with the repository replaced by a mock."""
    container = BaseContainer()
    container.register_singleton(Settings, settings)
    LoggingProvider.register(container)
    container.register_singleton(UserRepository, mock_user_repo)
    UserProvider.register(container)
    return container


@pytest.fixture
def make_user():
    """Factory for User domain objects with sensible defaults."""
    def _make_user(user_id: str = "64b7f0c2a1b2c3d4e5f60718", **overrides) -> User:
        fields = {
            "nickname": "jdoe",
            "first_name": "John",
            "last_name": "Doe",
            "email": "john@example.com",
            "country": "PT",
            "password": "$2b$12$hashed",
        }
        fields.update(overrides)
        return User(id=user_id, **fields)

    return _make_user


@pytest.fixture
def valid_payload():
    return {
        "nickname": "jdoe",
        "first_name": "John",
        "last_name": "Doe",
        "password": "supersecret",
        "email": "john@example.com",
        "country": "PT",
    }


@pytest.fixture
def users_log(caplog):
    """Capture records emitted by the request handlers' logger."""
    caplog.set_level(logging.DEBUG, logger=USERS_LOGGER_NAME)
    return caplog
