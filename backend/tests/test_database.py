"""
NoteKeeper Backend - Database & Lifespan Tests
================================================

What:  Tests schema creation, the session dependency and app startup/shutdown.
How:   Uses the module-level engine, which conftest points at a temp SQLite file.
"""

import pytest
from unittest.mock import AsyncMock, patch

from sqlalchemy import inspect

from notekeeper.config import settings
from notekeeper.database import create_tables, engine, get_db_session
from notekeeper.main import app, lifespan


class TestCreateTables:

    @pytest.mark.asyncio
    async def test_creates_notes_table(self):
        await create_tables()

        async with engine.connect() as conn:
            names = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        await engine.dispose()

        assert "notes" in names


class TestSessionDependency:

    @pytest.mark.asyncio
    async def test_rolls_back_and_reraises(self):
        gen = get_db_session()
        session = await gen.__anext__()
        session.rollback = AsyncMock()
        session.commit = AsyncMock()

        with pytest.raises(RuntimeError):
            await gen.athrow(RuntimeError("handler failed"))

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()
        await engine.dispose()

    @pytest.mark.asyncio
    async def test_commits_on_success(self):
        gen = get_db_session()
        session = await gen.__anext__()
        session.commit = AsyncMock()

        with pytest.raises(StopAsyncIteration):
            await gen.__anext__()

        session.commit.assert_awaited_once()
        await engine.dispose()


class TestLifespan:

    @pytest.mark.asyncio
    async def test_startup_creates_schema_and_shutdown_disposes(self):
        with patch("notekeeper.main.setup_logging"), \
             patch("notekeeper.main.create_tables", new=AsyncMock()) as mock_create, \
             patch("notekeeper.main.dispose_engine", new=AsyncMock()) as mock_dispose, \
             patch.object(settings, "db_auto_create", True):

            async with lifespan(app):
                mock_create.assert_awaited_once()
                mock_dispose.assert_not_awaited()

            mock_dispose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_startup_skips_schema_when_disabled(self):
        with patch("notekeeper.main.setup_logging"), \
             patch("notekeeper.main.create_tables", new=AsyncMock()) as mock_create, \
             patch("notekeeper.main.dispose_engine", new=AsyncMock()), \
             patch.object(settings, "db_auto_create", False):

            async with lifespan(app):
                pass

        mock_create.assert_not_awaited()
