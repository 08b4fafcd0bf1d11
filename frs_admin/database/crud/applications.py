from typing import Optional, Dict
from frs_admin.database.db import get_pool

# ============================
# APPLICATIONS
# ============================

async def get_application(app_guid: str) -> Optional[Dict]:
    """Récupère une application par guid."""
    pool = await get_pool()
    async with pool.acquire() as conn:
        result = await conn.fetchrow("SELECT * FROM apps WHERE guid = $1", app_guid)
        return dict(result) if result else None

async def get_app_member_role(app_id: int, user_id: int) -> Optional[str]:
    """
    Retourne le rôle d'un utilisateur dans une application.

    Returns:
        'OWNER', 'ADMINISTRATOR', 'USER' ou None si l'utilisateur n'est pas membre
    """
    pool = await get_pool()
    async with pool.acquire() as conn:
        return await conn.fetchval(
            "SELECT role FROM app_members WHERE app_id = $1 AND user_id = $2",
            app_id, user_id
        )
