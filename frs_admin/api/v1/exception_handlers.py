#!/usr/bin/env python3
# frs_admin/api/v1/exception_handlers.py
"""
Handlers d'exceptions globaux pour mapper les exceptions métier aux codes HTTP.

Utilisé dans main.py via app.add_exception_handler().
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from datetime import datetime, timezone
from frs_admin.core.exceptions import (
    AppException,
    ValidationError,
    ConflictError,
    PermissionError,
    NotFoundError,
    AuthenticationError
)
from frs_admin.core.schemas.errors import ErrorDetail, ErrorResponse, ProblemDetails
from frs_admin.config.logger import logger


def resolve_status_code(exc: AppException) -> int:
    """Retourne le code HTTP associé à une exception métier."""
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, AuthenticationError):
        return 401
    if isinstance(exc, PermissionError):
        return 403
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, ConflictError):
        return 409
    return 500


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handler global pour toutes les exceptions métier (AppException).

    Mapping exceptions → HTTP codes:
    - ValidationError → 400 Bad Request
    - AuthenticationError → 401 Unauthorized
    - PermissionError → 403 Forbidden
    - NotFoundError → 404 Not Found
    - ConflictError → 409 Conflict
    - AppException (générique) → 500 Internal Server Error

    Le corps est toujours {"message": ..., "code": ...}, suivi des éventuels
    détails de l'exception.

    Args:
        request: Requête FastAPI
        exc: Exception métier

    Returns:
        JSONResponse avec le code HTTP approprié
    """
    status_code = resolve_status_code(exc)

    # Logger avec niveau approprié selon la gravité
    if status_code >= 500:
        logger.error(f"[{exc.__class__.__name__}] {exc.message} | Path: {request.url.path}")
    else:
        logger.warning(f"[{exc.__class__.__name__}] {exc.message} | Path: {request.url.path}")

    # message et code ne sont jamais écrasés par les détails
    body = {
        **exc.details,
        **ErrorResponse(message=exc.message, code=int(exc.code)).model_dump()
    }

    return JSONResponse(status_code=status_code, content=body)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handler for request-shape errors detected by FastAPI (422).

    Covers bodies that cannot be parsed into the request schema at all
    (invalid JSON, missing or unknown model type, wrong field types).

    Args:
        request: FastAPI Request object
        exc: RequestValidationError instance from Pydantic

    Returns:
        JSONResponse with structured error details
    """
    error_details = []
    for error in exc.errors():
        # Ignore first element of loc: 'body', 'query', 'path'
        loc = error.get('loc', ())
        field_path = ' → '.join(str(x) for x in loc[1:]) if len(loc) > 1 else 'unknown'

        error_details.append(ErrorDetail(
            field=field_path,
            message=error.get('msg', 'Validation error'),
            value=error.get('input')
        ))

    error_count = len(error_details)
    problem = ProblemDetails(
        type="RequestValidationError",
        title="Validation Failed",
        status=422,
        detail=f"{error_count} validation error(s) detected",
        instance=str(request.url),
        errors=error_details,
        timestamp=datetime.now(timezone.utc).isoformat()
    )

    logger.warning(f"Validation error on {request.url.path}: {error_count} error(s)")

    return JSONResponse(
        status_code=422,
        content=problem.model_dump(mode="json", exclude_none=True)
    )
