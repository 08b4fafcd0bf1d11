from typing import Optional, Dict
from frs_admin.database.db import get_pool

# ============================
# USERS
# ============================

async def get_user(user_id: int) -> Optional[Dict]:
    """Récupère un utilisateur par ID."""
    pool = await get_pool()
    async with pool.acquire() as conn:
        result = await conn.fetchrow("SELECT * FROM users WHERE id = $1", user_id)
        return dict(result) if result else None
