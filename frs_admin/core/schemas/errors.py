#!/usr/bin/env python3
# frs_admin/core/schemas/errors.py
"""
Standardized error schemas for API responses.

ErrorResponse is the wire format of every AppException. ProblemDetails
(RFC 7807 inspired) is kept for request-shape errors raised by FastAPI itself.
"""

from pydantic import BaseModel, Field
from typing import Optional, List, Any


class ErrorResponse(BaseModel):
    """
    Body returned for business errors.

    Field order is part of the wire contract: {"message": ..., "code": ...}.
    """

    message: str = Field(..., description="Human-readable error message")
    code: int = Field(..., description="Numeric ExceptionCode")


class ErrorDetail(BaseModel):
    """
    Represents a single validation error for a specific field.

    Attributes:
        field: Field path where error occurred (e.g., "name", "type")
        message: Descriptive error message
        value: The value that failed validation (optional)
    """

    field: str = Field(..., description="Field path in error")
    message: str = Field(..., description="Error message")
    value: Optional[Any] = Field(None, description="Invalid value provided")


class ProblemDetails(BaseModel):
    """
    RFC 7807-inspired error response for malformed requests.

    Attributes:
        type: Machine-readable error type (e.g., "RequestValidationError")
        title: Short human-readable title (e.g., "Validation Failed")
        status: HTTP status code
        detail: Detailed explanation of the error
        instance: URI of the request that caused the error (optional)
        errors: List of field errors (optional)
        timestamp: ISO 8601 timestamp when error occurred (optional)
    """

    type: str = Field(..., description="Machine-readable error type")
    title: str = Field(..., description="Human-readable error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Detailed error explanation")
    instance: Optional[str] = Field(None, description="Request URI that caused error")
    errors: Optional[List[ErrorDetail]] = Field(None, description="Validation errors list")
    timestamp: Optional[str] = Field(None, description="ISO 8601 timestamp")
