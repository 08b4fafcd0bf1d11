"""Système de migrations automatiques."""

from pathlib import Path
import asyncpg
from frs_admin.config.logger import logger
from frs_admin.database.db import get_connection

MIGRATIONS_DIR = Path(__file__).parent / "migrations"


async def init_migrations_table():
    """Crée la table de tracking des migrations si elle n'existe pas."""
    conn = await get_connection()
    try:
        await conn.execute("""
            CREATE TABLE IF NOT EXISTS _migrations (
                id SERIAL PRIMARY KEY,
                filename TEXT NOT NULL UNIQUE,
                applied_at TIMESTAMPTZ DEFAULT NOW()
            )
        """)
        logger.info("✅ Table _migrations initialisée")
    finally:
        await conn.close()


async def get_applied_migrations() -> set:
    """Récupère la liste des migrations déjà appliquées."""
    conn = await get_connection()
    try:
        rows = await conn.fetch("SELECT filename FROM _migrations ORDER BY id")
        return {row['filename'] for row in rows}
    finally:
        await conn.close()


def parse_sql_statements(sql: str) -> list:
    """
    Découpe un script SQL en statements, en respectant les blocs PL/pgSQL ($$...$$).

    Les lignes de commentaire (--) et les lignes vides hors bloc sont ignorées.
    """
    statements = []
    current_stmt = []
    in_dollar_quote = False

    def flush():
        stmt = '\n'.join(current_stmt).strip()
        if stmt:
            statements.append(stmt)
        current_stmt.clear()

    for line in sql.split('\n'):
        stripped = line.strip()

        if not in_dollar_quote and (not stripped or stripped.startswith('--')):
            continue

        markers = line.count('$$')
        if markers:
            # Un nombre impair de $$ ouvre ou ferme un bloc
            if markers % 2 == 1:
                in_dollar_quote = not in_dollar_quote

            if in_dollar_quote:
                current_stmt.append(line)
                continue

            # Fin de bloc : le ; éventuel après le dernier $$ termine le statement
            head, _, tail = line.rpartition('$$')
            if ';' in tail:
                before, _, after = tail.partition(';')
                current_stmt.append(f"{head}$${before}")
                flush()
                if after.strip():
                    current_stmt.append(after)
            else:
                current_stmt.append(line)
            continue

        if in_dollar_quote:
            current_stmt.append(line)
            continue

        if ';' in line:
            parts = line.split(';')
            current_stmt.append(parts[0])
            flush()
            # Statements supplémentaires sur la même ligne
            for part in parts[1:-1]:
                current_stmt.append(part)
                flush()
            if parts[-1].strip():
                current_stmt.append(parts[-1])
        else:
            current_stmt.append(line)

    flush()
    return statements


async def run_migration(filepath: Path):
    """Exécute une migration SQL dans une transaction."""
    conn = await get_connection()
    try:
        statements = parse_sql_statements(filepath.read_text())

        async with conn.transaction():
            for stmt in statements:
                try:
                    await conn.execute(stmt)
                except asyncpg.exceptions.DuplicateObjectError:
                    logger.debug(f"⚠️ Objet déjà existant (ignoré)")
                except Exception as e:
                    logger.error(f"❌ Erreur SQL: {e}")
                    logger.error(f"Statement: {stmt[:200]}...")
                    raise

            await conn.execute(
                "INSERT INTO _migrations (filename) VALUES ($1) ON CONFLICT (filename) DO NOTHING",
                filepath.name
            )

        logger.info(f"✅ Migration appliquée : {filepath.name}")

    except Exception as e:
        logger.error(f"❌ Erreur lors de la migration {filepath.name}: {e}")
        raise
    finally:
        await conn.close()


async def run_pending_migrations(migrations_dir: Path = MIGRATIONS_DIR) -> int:
    """Exécute toutes les migrations en attente dans l'ordre. Retourne leur nombre."""
    await init_migrations_table()
    applied = await get_applied_migrations()

    migration_files = sorted(migrations_dir.glob("*.sql"))
    if not migration_files:
        logger.warning("⚠️ Aucun fichier de migration trouvé")
        return 0

    pending_count = 0
    for filepath in migration_files:
        if filepath.name not in applied:
            logger.info(f"🔄 Application de la migration : {filepath.name}")
            await run_migration(filepath)
            pending_count += 1

    if pending_count == 0:
        logger.info("✅ Toutes les migrations sont déjà appliquées")
    else:
        logger.info(f"✅ {pending_count} migration(s) appliquée(s) avec succès")

    return pending_count
