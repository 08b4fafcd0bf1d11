#!/usr/bin/env python3
# frs_admin/core/mappers/models.py
"""Projection des modèles de la base vers les réponses API."""

from frs_admin.api.v1.schemas.models import ModelResponse
from frs_admin.database.models import Model


class ModelMapper:
    """Convertit un Model en ModelResponse. Pur, sans accès base."""

    def to_response(self, model: Model, app_id: str) -> ModelResponse:
        return ModelResponse(
            id=model.guid,
            name=model.name,
            type=model.type,
            api_key=model.api_key,
            app_id=app_id,
            created_date=model.created_date
        )


model_mapper = ModelMapper()


def get_model_mapper() -> ModelMapper:
    """Dépendance FastAPI fournissant le mapper."""
    return model_mapper
