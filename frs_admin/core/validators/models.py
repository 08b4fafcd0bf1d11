#!/usr/bin/env python3
# frs_admin/core/validators/models.py
"""
Validation des corps de requête des modèles.

Pattern: les validateurs retournent (bool, Optional[ConstraintViolation])
- (True, None) → Validation OK
- (False, violation) → Validation KO

Les règles sont évaluées dans l'ordre : le nom vide passe avant la taille,
le nom passe avant le type. La taille porte sur la valeur brute.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
from frs_admin.core.exceptions import ExceptionCode, ValidationError

MODEL_NAME_MIN_LENGTH = 1
MODEL_NAME_MAX_LENGTH = 50

MODEL_NAME_EMPTY_MESSAGE = "Model name cannot be empty"
MODEL_TYPE_EMPTY_MESSAGE = "Model type cannot be empty"
MODEL_NAME_SIZE_MESSAGE = (
    f"Model name size must be between {MODEL_NAME_MIN_LENGTH} and {MODEL_NAME_MAX_LENGTH}"
)


@dataclass(frozen=True)
class ConstraintViolation:
    kind: str
    message: str
    code: ExceptionCode = ExceptionCode.VALIDATION_CONSTRAINT_VIOLATION


EMPTY_NAME = ConstraintViolation(kind="EMPTY", message=MODEL_NAME_EMPTY_MESSAGE)
NAME_SIZE = ConstraintViolation(kind="SIZE", message=MODEL_NAME_SIZE_MESSAGE)
EMPTY_TYPE = ConstraintViolation(kind="EMPTY_TYPE", message=MODEL_TYPE_EMPTY_MESSAGE)


class ModelValidator:
    """Validateur des requêtes de création / mise à jour de modèle."""

    @staticmethod
    def validate_name(value: Optional[str]) -> Tuple[bool, Optional[ConstraintViolation]]:
        """
        Valide le nom d'un modèle.

        Examples:
            >>> ModelValidator.validate_name("model-name")
            (True, None)
            >>> ModelValidator.validate_name(None)[1].kind
            'EMPTY'
            >>> ModelValidator.validate_name("x" * 51)[1].kind
            'SIZE'
        """
        if value is None or not value.strip():
            return False, EMPTY_NAME

        if not MODEL_NAME_MIN_LENGTH <= len(value) <= MODEL_NAME_MAX_LENGTH:
            return False, NAME_SIZE

        return True, None

    @staticmethod
    def ensure_valid_name(value: Optional[str]) -> str:
        """
        Valide le nom et retourne sa forme normalisée (sans espaces autour).

        Raises:
            ValidationError: code VALIDATION_CONSTRAINT_VIOLATION si le nom est invalide
        """
        is_valid, violation = ModelValidator.validate_name(value)
        if not is_valid:
            raise ValidationError(violation.message, code=violation.code)

        return value.strip()

    @staticmethod
    def validate_type(value: Optional[object]) -> Tuple[bool, Optional[ConstraintViolation]]:
        """Valide la présence du type (requis à la création)."""
        if value is None:
            return False, EMPTY_TYPE

        return True, None

    @staticmethod
    def ensure_valid_type(value: Optional[object]) -> None:
        is_valid, violation = ModelValidator.validate_type(value)
        if not is_valid:
            raise ValidationError(violation.message, code=violation.code)
