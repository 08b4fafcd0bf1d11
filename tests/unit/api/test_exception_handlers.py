"""Unit tests for global exception handlers.

Tests verify that all custom exceptions are correctly mapped to HTTP status codes
and that error bodies follow the {"message", "code"} wire format.
"""

import pytest
import json
from unittest.mock import Mock
from fastapi import Request
from fastapi.exceptions import RequestValidationError

from frs_admin.api.v1.exception_handlers import app_exception_handler, validation_exception_handler
from frs_admin.core.exceptions import (
    AppException,
    ExceptionCode,
    ValidationError,
    AuthenticationError,
    PermissionError,
    NotFoundError,
    ConflictError
)


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def mock_request():
    """Create a mock FastAPI request."""
    request = Mock(spec=Request)
    request.url = Mock()
    request.url.path = "/app/app-guid/model"
    request.method = "POST"
    return request


# ============================================================================
# HTTP Status Code Mapping Tests
# ============================================================================

@pytest.mark.asyncio
async def test_validation_error_returns_400_with_exact_body(mock_request):
    """ValidationError should map to 400 with the compact {message, code} body."""
    exc = ValidationError("Model name cannot be empty")

    response = await app_exception_handler(mock_request, exc)

    assert response.status_code == 400
    assert response.body == b'{"message":"Model name cannot be empty","code":26}'


@pytest.mark.asyncio
async def test_authentication_error_returns_401(mock_request):
    exc = AuthenticationError("Not authenticated")

    response = await app_exception_handler(mock_request, exc)

    assert response.status_code == 401
    assert json.loads(response.body) == {"message": "Not authenticated", "code": 24}


@pytest.mark.asyncio
async def test_permission_error_returns_403(mock_request):
    exc = PermissionError("Access denied")

    response = await app_exception_handler(mock_request, exc)

    assert response.status_code == 403
    assert json.loads(response.body)["code"] == ExceptionCode.ACCESS_DENIED


@pytest.mark.asyncio
async def test_not_found_error_returns_404_with_given_code(mock_request):
    exc = NotFoundError("Application app-guid not found", code=ExceptionCode.APP_NOT_FOUND)

    response = await app_exception_handler(mock_request, exc)

    assert response.status_code == 404
    assert json.loads(response.body) == {"message": "Application app-guid not found", "code": 10}


@pytest.mark.asyncio
async def test_conflict_error_returns_409(mock_request):
    exc = ConflictError("Model name 'x' is already used in this application")

    response = await app_exception_handler(mock_request, exc)

    assert response.status_code == 409
    assert json.loads(response.body)["code"] == 21


@pytest.mark.asyncio
async def test_generic_app_exception_returns_500(mock_request):
    exc = AppException("Something went wrong")

    response = await app_exception_handler(mock_request, exc)

    assert response.status_code == 500
    assert json.loads(response.body) == {"message": "Something went wrong", "code": 0}


@pytest.mark.asyncio
async def test_details_are_appended_to_body(mock_request):
    exc = ConflictError("Duplicate model", details={"name": "model-name"})

    response = await app_exception_handler(mock_request, exc)

    assert json.loads(response.body) == {"message": "Duplicate model", "code": 21, "name": "model-name"}


@pytest.mark.asyncio
async def test_details_cannot_override_message_or_code(mock_request):
    exc = NotFoundError("x", details={"code": 999, "message": "other", "model": "model-guid"})

    response = await app_exception_handler(mock_request, exc)

    assert response.status_code == 404
    assert json.loads(response.body) == {"message": "x", "code": 0, "model": "model-guid"}


@pytest.mark.asyncio
async def test_request_validation_error_returns_422_problem_details(mock_request):
    exc = RequestValidationError([
        {"loc": ("body", "type"), "msg": "Field required", "type": "missing", "input": {"name": "m"}}
    ])

    response = await validation_exception_handler(mock_request, exc)

    assert response.status_code == 422
    body = json.loads(response.body)
    assert body["type"] == "RequestValidationError"
    assert body["status"] == 422
    assert body["detail"] == "1 validation error(s) detected"
    assert body["errors"] == [{"field": "type", "message": "Field required", "value": {"name": "m"}}]
