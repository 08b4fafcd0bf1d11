#!/usr/bin/env python3
# frs_admin/core/services/models.py
"""
Service métier des modèles de reconnaissance faciale.

Toutes les opérations sont bornées à une application : un modèle d'une autre
application est traité comme inexistant.
"""

from typing import List
import asyncpg
from frs_admin.api.v1.schemas.models import ModelCreate, ModelResponse, ModelUpdate
from frs_admin.config.logger import logger
from frs_admin.core.exceptions import ConflictError, ExceptionCode, NotFoundError
from frs_admin.core.mappers.models import ModelMapper, model_mapper
from frs_admin.core.services.base import BaseService
from frs_admin.core.utils.id_generator import generate_api_key, generate_guid
from frs_admin.database import crud
from frs_admin.database.models import Application, Model


class ModelService(BaseService):
    """Service de gestion des modèles d'une application."""

    def __init__(self, mapper: ModelMapper = model_mapper):
        self.mapper = mapper

    @staticmethod
    async def _get_model(application: Application, model_guid: str) -> Model:
        model_row = await crud.get_model(application.id, model_guid)
        if not model_row:
            raise NotFoundError(
                f"Model {model_guid} not found",
                code=ExceptionCode.MODEL_NOT_FOUND
            )
        return Model.from_row(model_row)

    @staticmethod
    async def _check_name_unique(application: Application, name: str, model_guid: str = None) -> None:
        existing = await crud.get_model_by_name(application.id, name)
        if existing and existing['guid'] != model_guid:
            raise ConflictError(f"Model name '{name}' is already used in this application")

    async def get_model_dto(self, app_guid: str, model_guid: str, user_id: int) -> ModelResponse:
        application = await self.check_app_access(app_guid, user_id)
        model = await self._get_model(application, model_guid)
        return self.mapper.to_response(model, app_guid)

    async def get_models(self, app_guid: str, user_id: int) -> List[ModelResponse]:
        application = await self.check_app_access(app_guid, user_id)
        rows = await crud.list_models_by_app(application.id)
        return [self.mapper.to_response(Model.from_row(row), app_guid) for row in rows]

    async def create_recognition_model(self, request: ModelCreate, app_guid: str, user_id: int) -> Model:
        """
        Crée un modèle dans l'application avec un guid et une clé API neufs.

        Raises:
            NotFoundError: application inconnue
            PermissionError: utilisateur ni OWNER ni ADMINISTRATOR
            ConflictError: nom déjà utilisé dans l'application
        """
        application = await self.check_app_access(app_guid, user_id, write=True)
        await self._check_name_unique(application, request.name)

        try:
            row = await crud.create_model(
                app_id=application.id,
                guid=generate_guid(),
                name=request.name,
                model_type=request.type.value,
                api_key=generate_api_key()
            )
        except asyncpg.exceptions.UniqueViolationError:
            raise ConflictError(f"Model name '{request.name}' is already used in this application")

        model = Model.from_row(row)
        logger.info(f"Model {model.guid} created in app {app_guid} by user {user_id}")
        return model

    async def update_model(self, request: ModelUpdate, app_guid: str, model_guid: str, user_id: int) -> Model:
        application = await self.check_app_access(app_guid, user_id, write=True)
        model = await self._get_model(application, model_guid)

        if request.name == model.name:
            return model

        await self._check_name_unique(application, request.name, model_guid)

        try:
            row = await crud.update_model(model.id, request.name)
        except asyncpg.exceptions.UniqueViolationError:
            raise ConflictError(f"Model name '{request.name}' is already used in this application")

        if not row:
            raise NotFoundError(
                f"Model {model_guid} not found",
                code=ExceptionCode.MODEL_NOT_FOUND
            )
        logger.info(f"Model {model_guid} renamed in app {app_guid} by user {user_id}")
        return Model.from_row(row)

    async def regenerate_api_key(self, app_guid: str, model_guid: str, user_id: int) -> None:
        application = await self.check_app_access(app_guid, user_id, write=True)
        model = await self._get_model(application, model_guid)

        updated = await crud.update_model_api_key(model.id, generate_api_key())
        if not updated:
            raise NotFoundError(
                f"Model {model_guid} not found",
                code=ExceptionCode.MODEL_NOT_FOUND
            )
        logger.info(f"API key regenerated for model {model_guid} in app {app_guid}")

    async def delete_model(self, app_guid: str, model_guid: str, user_id: int) -> None:
        application = await self.check_app_access(app_guid, user_id, write=True)
        model = await self._get_model(application, model_guid)

        await crud.delete_model(model.id)
        logger.info(f"Model {model_guid} deleted from app {app_guid} by user {user_id}")


model_service = ModelService()


def get_model_service() -> ModelService:
    """Dépendance FastAPI fournissant le service des modèles."""
    return model_service
