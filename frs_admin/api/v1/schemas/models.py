#!/usr/bin/env python3
# frs_admin/api/v1/schemas/models.py
"""Face recognition model schemas."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class ModelType(str, Enum):
    """Kind of face service a model exposes."""
    RECOGNITION = "RECOGNITION"
    DETECTION = "DETECTION"
    VERIFICATION = "VERIFICATION"


class ModelCreate(BaseModel):
    """
    Create model request.

    `name` and `type` are optional at the schema level so that missing values are
    reported by ModelValidator as 400 errors, the name being checked first.
    """
    name: Optional[str] = None
    type: Optional[ModelType] = None


class ModelUpdate(BaseModel):
    """Update model request."""
    name: Optional[str] = None


class ModelResponse(BaseModel):
    """Model projection returned by the API (null fields are omitted)."""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[ModelType] = None
    api_key: Optional[str] = Field(None, alias="apiKey")
    app_id: Optional[str] = Field(None, alias="appId")
    created_date: Optional[datetime] = Field(None, alias="createdDate")
