"""
NoteKeeper Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── memory_repository: In-memory NoteRepository (no database)
    ├── db_engine: Async SQLite engine on a temp file, tables created
    ├── db_session: AsyncSession bound to db_engine
    ├── test_app: Fresh FastAPI app, session dependency pointed at db_engine
    └── test_client: HTTPX AsyncClient talking to test_app
"""

import os
import tempfile
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

# Override settings for testing BEFORE any notekeeper imports
os.environ["DATABASE_URL"] = (
    f"sqlite+aiosqlite:///{tempfile.mkdtemp(prefix='notekeeper_test_')}/app.db"
)
os.environ["DB_AUTO_CREATE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from notekeeper.database import Base
from notekeeper.models.note import Note
from notekeeper.repositories.note_repository import NoteRepository


# ══════════════════════════════════════════════════════════════════════════
# Test Doubles
# ══════════════════════════════════════════════════════════════════════════

class InMemoryNoteRepository(NoteRepository):
    """
    NoteRepository kept in a dict.

    Records every call in `calls` so tests can assert the service touched
    storage exactly once.
    """

    def __init__(self) -> None:
        self.notes: Dict[UUID, Note] = {}
        self.calls: List[str] = []

    async def list_all(self) -> List[Note]:
        self.calls.append("list_all")
        return sorted(self.notes.values(), key=lambda note: note.title)

    async def find_by_id(self, note_id: UUID) -> Optional[Note]:
        self.calls.append("find_by_id")
        return self.notes.get(note_id)

    async def insert(self, title: str, content: Optional[str]) -> Note:
        self.calls.append("insert")
        note = Note(id=uuid4(), title=title, content=content)
        self.notes[note.id] = note
        return note

    async def merge_and_fetch(
        self, note_id: UUID, changes: Dict[str, Any]
    ) -> Optional[Note]:
        self.calls.append("merge_and_fetch")
        note = self.notes.get(note_id)
        if note is None:
            return None
        for field, value in changes.items():
            setattr(note, field, value)
        return note

    async def delete_by_id(self, note_id: UUID) -> int:
        self.calls.append("delete_by_id")
        return 1 if self.notes.pop(note_id, None) is not None else 0


@pytest.fixture
def memory_repository():
    return InMemoryNoteRepository()


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    Provides an async engine on a fresh SQLite file with the schema created.

    A file (not :memory:) keeps the data visible across the separate
    sessions opened by consecutive requests.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    factory = async_sessionmaker(db_engine, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def test_app(db_engine):
    """
    Provides a fresh FastAPI app whose session dependency uses db_engine.

    Tests may add further entries to `app.dependency_overrides`.
    """
    from notekeeper.database import get_db_session
    from notekeeper.main import create_app

    factory = async_sessionmaker(db_engine, expire_on_commit=False)

    async def override_get_db_session():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session
    return app


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    How:   ASGITransport routes requests directly to the app; the
           lifespan does not run, so the schema comes from db_engine.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    from notekeeper.database import engine as app_engine

    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    # /health uses the module-level engine
    await app_engine.dispose()
