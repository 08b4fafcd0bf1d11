#!/usr/bin/env python3
# frs_admin/core/schemas/__init__.py
"""
Schemas for core domain models.
"""

from .errors import ErrorResponse, ErrorDetail, ProblemDetails

__all__ = ['ErrorResponse', 'ErrorDetail', 'ProblemDetails']
