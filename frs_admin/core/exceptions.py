#!/usr/bin/env python3
# frs_admin/core/exceptions.py
"""
Exceptions métier typées pour l'application.

Chaque exception porte un ExceptionCode numérique, sérialisé tel quel dans le
corps d'erreur {"message": ..., "code": ...}. Le code HTTP dépend de la classe
de l'exception et est appliqué par le handler global.
"""

from enum import IntEnum
from typing import Optional, Dict, Any


class ExceptionCode(IntEnum):
    """Codes d'erreur exposés aux clients de l'API."""

    UNDEFINED = 0
    ACCESS_DENIED = 1
    APP_NOT_FOUND = 10
    MODEL_NOT_FOUND = 19
    NAME_IS_NOT_UNIQUE = 21
    MISSING_AUTHENTICATION = 24
    VALIDATION_CONSTRAINT_VIOLATION = 26


class AppException(Exception):
    """Exception de base pour toutes les exceptions métier."""

    default_code = ExceptionCode.UNDEFINED

    def __init__(
        self,
        message: str,
        code: Optional[ExceptionCode] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code if code is not None else self.default_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppException):
    """Erreur de validation des données (HTTP 400)."""
    default_code = ExceptionCode.VALIDATION_CONSTRAINT_VIOLATION


class ConflictError(AppException):
    """Conflit avec l'état actuel (doublon, etc.) (HTTP 409)."""
    default_code = ExceptionCode.NAME_IS_NOT_UNIQUE


class PermissionError(AppException):
    """Permission refusée (HTTP 403)."""
    default_code = ExceptionCode.ACCESS_DENIED


class NotFoundError(AppException):
    """Ressource non trouvée (HTTP 404)."""
    pass


class AuthenticationError(AppException):
    """Erreur d'authentification (HTTP 401)."""
    default_code = ExceptionCode.MISSING_AUTHENTICATION
