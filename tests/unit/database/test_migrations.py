"""Unit tests for the SQL migration parser and runner."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from frs_admin.database.migrations import MIGRATIONS_DIR, parse_sql_statements, run_pending_migrations


def test_splits_simple_statements_and_skips_comments():
    sql = """
    -- users
    CREATE TABLE a (id INT);

    CREATE TABLE b (
        id INT
    );
    """

    statements = parse_sql_statements(sql)

    assert len(statements) == 2
    assert statements[0] == "CREATE TABLE a (id INT)"
    assert statements[1].startswith("CREATE TABLE b (")
    assert statements[1].endswith(")")


def test_several_statements_on_one_line():
    assert parse_sql_statements("SELECT 1; SELECT 2;") == ["SELECT 1", "SELECT 2"]


def test_keeps_dollar_quoted_block_whole():
    sql = """
    CREATE FUNCTION f() RETURNS TRIGGER AS $$
    BEGIN
        -- kept inside the body
        RAISE EXCEPTION 'nope';
    END;
    $$ LANGUAGE plpgsql;
    DROP TRIGGER IF EXISTS t ON models;
    """

    statements = parse_sql_statements(sql)

    assert len(statements) == 2
    assert "RAISE EXCEPTION 'nope';" in statements[0]
    assert "-- kept inside the body" in statements[0]
    assert statements[0].endswith("$$ LANGUAGE plpgsql")
    assert statements[1] == "DROP TRIGGER IF EXISTS t ON models"


def test_inline_dollar_block():
    sql = "CREATE FUNCTION one() RETURNS INT AS $$ SELECT 1; $$ LANGUAGE sql;"

    assert parse_sql_statements(sql) == [
        "CREATE FUNCTION one() RETURNS INT AS $$ SELECT 1; $$ LANGUAGE sql"
    ]


def test_initial_schema_parses():
    sql = (MIGRATIONS_DIR / "001_initial_schema.sql").read_text()

    statements = parse_sql_statements(sql)

    assert len(statements) == 8
    assert statements[0].startswith("CREATE TABLE IF NOT EXISTS users")
    assert any("CONSTRAINT models_app_name_unique UNIQUE (app_id, name)" in s for s in statements)


@pytest.mark.asyncio
async def test_run_pending_migrations_skips_applied_files(tmp_path):
    (tmp_path / "001_first.sql").write_text("SELECT 1;")
    (tmp_path / "002_second.sql").write_text("SELECT 2;")

    with patch("frs_admin.database.migrations.init_migrations_table", new=AsyncMock()), \
         patch("frs_admin.database.migrations.get_applied_migrations", new=AsyncMock(return_value={"001_first.sql"})), \
         patch("frs_admin.database.migrations.run_migration", new=AsyncMock()) as mock_run:

        applied = await run_pending_migrations(tmp_path)

    assert applied == 1
    mock_run.assert_awaited_once_with(tmp_path / "002_second.sql")


@pytest.mark.asyncio
async def test_run_pending_migrations_without_files(tmp_path):
    with patch("frs_admin.database.migrations.init_migrations_table", new=AsyncMock()), \
         patch("frs_admin.database.migrations.get_applied_migrations", new=AsyncMock(return_value=set())), \
         patch("frs_admin.database.migrations.run_migration", new=AsyncMock()) as mock_run:

        applied = await run_pending_migrations(tmp_path)

    assert applied == 0
    mock_run.assert_not_called()
