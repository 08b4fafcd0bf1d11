from typing import Optional, Dict, List
from frs_admin.database.db import get_pool

# ============================
# MODELS
# ============================

async def create_model(app_id: int, guid: str, name: str, model_type: str, api_key: str) -> Dict:
    """Crée un modèle et retourne la ligne insérée."""
    pool = await get_pool()
    async with pool.acquire() as conn:
        result = await conn.fetchrow(
            """INSERT INTO models (guid, name, type, api_key, app_id)
               VALUES ($1, $2, $3, $4, $5)
               RETURNING *""",
            guid, name, model_type, api_key, app_id
        )
        return dict(result)

async def get_model(app_id: int, model_guid: str) -> Optional[Dict]:
    """Récupère un modèle par guid, uniquement s'il appartient à l'application."""
    pool = await get_pool()
    async with pool.acquire() as conn:
        result = await conn.fetchrow(
            "SELECT * FROM models WHERE guid = $1 AND app_id = $2",
            model_guid, app_id
        )
        return dict(result) if result else None

async def get_model_by_name(app_id: int, name: str) -> Optional[Dict]:
    """Récupère un modèle par nom dans une application."""
    pool = await get_pool()
    async with pool.acquire() as conn:
        result = await conn.fetchrow(
            "SELECT * FROM models WHERE app_id = $1 AND name = $2",
            app_id, name
        )
        return dict(result) if result else None

async def list_models_by_app(app_id: int) -> List[Dict]:
    """Liste les modèles d'une application par date de création."""
    pool = await get_pool()
    async with pool.acquire() as conn:
        rows = await conn.fetch(
            "SELECT * FROM models WHERE app_id = $1 ORDER BY created_date, id",
            app_id
        )
        return [dict(row) for row in rows]

async def update_model(model_id: int, name: str) -> Optional[Dict]:
    """Renomme un modèle et retourne la ligne mise à jour."""
    pool = await get_pool()
    async with pool.acquire() as conn:
        result = await conn.fetchrow(
            "UPDATE models SET name = $1 WHERE id = $2 RETURNING *",
            name, model_id
        )
        return dict(result) if result else None

async def update_model_api_key(model_id: int, api_key: str) -> bool:
    """Remplace la clé API d'un modèle."""
    pool = await get_pool()
    async with pool.acquire() as conn:
        result = await conn.execute(
            "UPDATE models SET api_key = $1 WHERE id = $2",
            api_key, model_id
        )
        return int(result.split()[1]) > 0

async def delete_model(model_id: int) -> bool:
    """Supprime un modèle."""
    pool = await get_pool()
    async with pool.acquire() as conn:
        result = await conn.execute("DELETE FROM models WHERE id = $1", model_id)
        return int(result.split()[1]) > 0
