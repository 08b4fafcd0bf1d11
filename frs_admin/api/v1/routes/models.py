# frs_admin/api/v1/routes/models.py
"""Endpoints pour gérer les modèles d'une application."""

from fastapi import APIRouter, Depends, Response, status
from typing import List
from frs_admin.database.models import User
from frs_admin.api.v1.schemas import ModelCreate, ModelUpdate, ModelResponse
from frs_admin.core.utils.auth import get_current_user
from frs_admin.core.services.models import ModelService, get_model_service
from frs_admin.core.mappers.models import ModelMapper, get_model_mapper
from frs_admin.core.validators.models import ModelValidator
from frs_admin.config.logger import logger

router = APIRouter(prefix="/app/{app_id}", tags=["models"])


@router.get("/model/{model_id}", response_model=ModelResponse, response_model_exclude_none=True)
async def get_model(
    app_id: str,
    model_id: str,
    current_user: User = Depends(get_current_user),
    service: ModelService = Depends(get_model_service)
):
    """
    Récupère un modèle de l'application.
    """
    return await service.get_model_dto(app_id, model_id, current_user.id)

@router.get("/models", response_model=List[ModelResponse], response_model_exclude_none=True)
async def get_models(
    app_id: str,
    current_user: User = Depends(get_current_user),
    service: ModelService = Depends(get_model_service)
):
    """
    Liste les modèles de l'application, dans l'ordre retourné par le service.
    """
    return await service.get_models(app_id, current_user.id)

@router.post(
    "/model",
    response_model=ModelResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED
)
async def create_model(
    app_id: str,
    request: ModelCreate,
    current_user: User = Depends(get_current_user),
    service: ModelService = Depends(get_model_service),
    mapper: ModelMapper = Depends(get_model_mapper)
):
    """
    Crée un nouveau modèle dans l'application.

    Le nom puis le type sont validés avant tout appel au service.
    """
    name = ModelValidator.ensure_valid_name(request.name)
    ModelValidator.ensure_valid_type(request.type)
    logger.debug(f"Creating {request.type.value} model in app {app_id}")

    model = await service.create_recognition_model(
        request.model_copy(update={"name": name}),
        app_id,
        current_user.id
    )
    return mapper.to_response(model, app_id)

@router.put("/model/{model_id}", response_model=ModelResponse, response_model_exclude_none=True)
async def update_model(
    app_id: str,
    model_id: str,
    request: ModelUpdate,
    current_user: User = Depends(get_current_user),
    service: ModelService = Depends(get_model_service),
    mapper: ModelMapper = Depends(get_model_mapper)
):
    """
    Renomme un modèle.
    """
    name = ModelValidator.ensure_valid_name(request.name)

    model = await service.update_model(
        request.model_copy(update={"name": name}),
        app_id,
        model_id,
        current_user.id
    )
    return mapper.to_response(model, app_id)

@router.put("/model/{model_id}/apikey", response_model=ModelResponse, response_model_exclude_none=True)
async def regenerate_api_key(
    app_id: str,
    model_id: str,
    current_user: User = Depends(get_current_user),
    service: ModelService = Depends(get_model_service)
):
    """
    Génère une nouvelle clé API pour le modèle et retourne le modèle à jour.
    """
    await service.regenerate_api_key(app_id, model_id, current_user.id)
    return await service.get_model_dto(app_id, model_id, current_user.id)

@router.delete("/model/{model_id}", status_code=status.HTTP_200_OK)
async def delete_model(
    app_id: str,
    model_id: str,
    current_user: User = Depends(get_current_user),
    service: ModelService = Depends(get_model_service)
):
    """
    Supprime un modèle. Réponse 200 sans corps.
    """
    await service.delete_model(app_id, model_id, current_user.id)
    return Response(status_code=status.HTTP_200_OK)
