# db.py - Gestion de base de données asynchrone

import asyncpg
from frs_admin.config.config import settings
from frs_admin.config.logger import logger

# Global test pool for test mode (set by test fixtures)
_test_pool = None

async def get_pool() -> asyncpg.Pool:
    """Returns the global database connection pool.

    In test mode, returns _test_pool if set.
    Otherwise returns the FastAPI app.state.db_pool.
    """
    if _test_pool is not None:
        return _test_pool

    from frs_admin.api.main import app
    return app.state.db_pool

async def create_pool() -> asyncpg.Pool:
    """Crée le pool de connexions à partir des settings."""
    pool = await asyncpg.create_pool(
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
        user=settings.db_user,
        password=settings.db_password,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        timeout=60,
        command_timeout=30
    )
    logger.info(f"✅ Database pool created: min={settings.db_pool_min_size}, max={settings.db_pool_max_size}")
    return pool

async def get_connection() -> asyncpg.Connection:
    """Ouvre une connexion unique (migrations, vérifications au démarrage)."""
    return await asyncpg.connect(
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
        user=settings.db_user,
        password=settings.db_password
    )

async def init_db():
    """Vérifie la connexion à la base de données."""
    conn = await get_connection()
    try:
        await conn.execute("SELECT 1")
        logger.info("✅ Database connection established")
    except Exception as e:
        logger.error(f"❌ Failed to connect to database: {str(e)}")
        raise
    finally:
        await conn.close()
