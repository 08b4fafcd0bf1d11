#!/usr/bin/env python3
# frs_admin/api/v1/schemas/__init__.py
"""
Pydantic schemas for API v1.

Import from this module for convenience:

    from frs_admin.api.v1.schemas import ModelCreate, ModelResponse

Or import directly from domain modules:

    from frs_admin.api.v1.schemas.models import ModelCreate
"""

# Face recognition models
from .models import ModelType, ModelCreate, ModelUpdate, ModelResponse

__all__ = [
    "ModelType",
    "ModelCreate",
    "ModelUpdate",
    "ModelResponse",
]
