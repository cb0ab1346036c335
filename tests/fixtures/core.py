from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlmodel import Session

from users_service.core.services import DbSessionService
from users_service.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
    LoggingConfig,
)


@pytest.fixture
def test_config() -> ConfigData:
    """Configuration pointing at a private in-memory database."""
    return ConfigData(
        app=AppConfig(environment="test"),
        database=DatabaseConfig(url="sqlite:///:memory:", environment_mode="test"),
        logging=LoggingConfig(level="WARNING"),
    )


@pytest.fixture
def database_service(test_config: ConfigData) -> Generator[DbSessionService]:
    """Create a fresh database for each test."""
    service = DbSessionService(test_config)
    service.create_all()
    try:
        yield service
    finally:
        service.dispose()


@pytest.fixture
def session(database_service: DbSessionService) -> Generator[Session]:
    """Create a database session bound to the per-test database."""
    with database_service.get_session() as session:
        try:
            yield session
        finally:
            session.rollback()


@pytest.fixture
def app(test_config: ConfigData) -> FastAPI:
    from users_service.api.http.app import create_app

    return create_app(test_config)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient]:
    """Test client with the application lifespan running."""
    with TestClient(app) as test_client:
        yield test_client
