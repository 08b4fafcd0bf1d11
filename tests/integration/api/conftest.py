"""Pytest configuration and fixtures for API tests.

The routers are mounted on a bare FastAPI app without lifespan (no database).
Identity, service and mapper dependencies are replaced with mocks through
`dependency_overrides`, so each test controls exactly what the collaborators return.
"""

import pytest
from unittest.mock import MagicMock
from fastapi import FastAPI
from fastapi.testclient import TestClient

from frs_admin.api.main import register_exception_handlers
from frs_admin.api.v1.routes import health, models
from frs_admin.core.mappers.models import ModelMapper, get_model_mapper
from frs_admin.core.services.models import ModelService, get_model_service
from frs_admin.core.utils.auth import get_current_user


@pytest.fixture
def mock_model_service():
    """ModelService double: async methods become AsyncMock through the spec."""
    return MagicMock(spec=ModelService)


@pytest.fixture
def mock_model_mapper():
    return MagicMock(spec=ModelMapper)


@pytest.fixture
def test_app(mock_model_service, mock_model_mapper):
    """FastAPI app with the model routes and mocked collaborators."""
    app = FastAPI(title="Test API")
    register_exception_handlers(app)

    app.include_router(models.router)
    app.include_router(health.router)

    app.dependency_overrides[get_model_service] = lambda: mock_model_service
    app.dependency_overrides[get_model_mapper] = lambda: mock_model_mapper

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(test_app):
    """Client without identity override: get_current_user runs for real."""
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def client(test_app, test_user):
    """Client authenticated as `test_user`."""
    test_app.dependency_overrides[get_current_user] = lambda: test_user

    with TestClient(test_app) as test_client:
        yield test_client
