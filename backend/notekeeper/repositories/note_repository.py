"""
NoteKeeper Backend - Note Repository
======================================

What:  Data access layer for the `notes` table.
How:   `NoteRepository` declares the capability the service depends on;
       `SQLAlchemyNoteRepository` implements it on an AsyncSession.
Who:   Constructed per request by `get_note_service()`; replaced by an
       in-memory double in the service tests.

Capability:
    list_all()                 → all notes ordered by title ascending
    find_by_id(id)             → note or None
    insert(title, content)     → the new note, id assigned
    merge_and_fetch(id, changes) → merged note or None if absent
    delete_by_id(id)           → number of rows deleted

Statements are flushed, never committed, here: the commit belongs to the
session dependency in database.py.
"""

import abc
import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.models.note import Note

logger = logging.getLogger(__name__)


class NoteRepository(abc.ABC):
    """Storage capability required by NoteService."""

    @abc.abstractmethod
    async def list_all(self) -> List[Note]:
        ...

    @abc.abstractmethod
    async def find_by_id(self, note_id: UUID) -> Optional[Note]:
        ...

    @abc.abstractmethod
    async def insert(self, title: str, content: Optional[str]) -> Note:
        ...

    @abc.abstractmethod
    async def merge_and_fetch(
        self, note_id: UUID, changes: Dict[str, Any]
    ) -> Optional[Note]:
        """Apply `changes` to the stored note and return it, or None if absent."""

    @abc.abstractmethod
    async def delete_by_id(self, note_id: UUID) -> int:
        ...


class SQLAlchemyNoteRepository(NoteRepository):
    """
    NoteRepository backed by an async SQLAlchemy session.

    Query plans:
        list_all:        SELECT * FROM notes ORDER BY title ASC
                         → idx_notes_title
        find_by_id:      SELECT * FROM notes WHERE id = :uuid
                         → primary key lookup
        delete_by_id:    DELETE FROM notes WHERE id = :uuid
                         → rowcount tells whether anything was removed
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_all(self) -> List[Note]:
        result = await self.session.execute(
            select(Note).order_by(Note.title.asc())
        )
        return list(result.scalars().all())

    async def find_by_id(self, note_id: UUID) -> Optional[Note]:
        result = await self.session.execute(
            select(Note).where(Note.id == note_id)
        )
        return result.scalar_one_or_none()

    async def insert(self, title: str, content: Optional[str]) -> Note:
        note = Note(title=title, content=content)
        self.session.add(note)
        await self.session.flush()
        return note

    async def merge_and_fetch(
        self, note_id: UUID, changes: Dict[str, Any]
    ) -> Optional[Note]:
        """
        Load the note, overwrite only the keys present in `changes`, flush.

        An empty `changes` dict returns the stored note unmodified.
        """
        note = await self.find_by_id(note_id)
        if note is None:
            return None

        for field, value in changes.items():
            setattr(note, field, value)

        if changes:
            await self.session.flush()
        return note

    async def delete_by_id(self, note_id: UUID) -> int:
        result = await self.session.execute(
            delete(Note).where(Note.id == note_id)
        )
        await self.session.flush()
        logger.debug("Deleted %d row(s) for note %s", result.rowcount, note_id)
        return result.rowcount
