"""Pytest configuration and shared fixtures for all tests."""

import os

# Settings are read at import time: prime the environment before any frs_admin import
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-key-min-32-chars-long-12345")
os.environ.setdefault("JWT_ALGORITHM", "HS256")
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from frs_admin.database.models import User, Model

from test_constants import APP_GUID, MODEL_GUID, MODEL_NAME, TEST_USER_ID


class AsyncMockContextManager:
    """Helper class to create async context manager from mock."""

    def __init__(self, return_value):
        self.return_value = return_value

    async def __aenter__(self):
        return self.return_value

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        pass


@pytest.fixture
def mock_db_pool():
    """Mock asyncpg database pool for unit tests."""
    mock_conn = AsyncMock()
    mock_conn.execute = AsyncMock(return_value="UPDATE 1")
    mock_conn.fetchrow = AsyncMock(return_value=None)
    mock_conn.fetchval = AsyncMock(return_value=None)
    mock_conn.fetch = AsyncMock(return_value=[])

    mock_pool = MagicMock()
    mock_pool.acquire = MagicMock(return_value=AsyncMockContextManager(mock_conn))

    return mock_pool, mock_conn


@pytest.fixture
def test_user():
    """Authenticated caller used by API tests."""
    return User(id=TEST_USER_ID, email="test@example.com", first_name="Test", last_name="User")


@pytest.fixture
def model_row():
    """Raw `models` row as returned by the CRUD layer."""
    return {
        "id": 7,
        "guid": MODEL_GUID,
        "name": MODEL_NAME,
        "type": "RECOGNITION",
        "api_key": "f3b1c6d2-0a4e-4d8b-9c7e-5a2f1e0d3b4c",
        "app_id": 3,
        "created_date": datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    }


@pytest.fixture
def app_row():
    """Raw `apps` row as returned by the CRUD layer."""
    return {"id": 3, "guid": APP_GUID, "name": "Demo application", "created_at": None}


@pytest.fixture
def sample_model(model_row):
    return Model.from_row(model_row)
