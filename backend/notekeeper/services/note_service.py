"""
NoteKeeper Backend - Note Service (Note Store)
================================================

What:  Business logic for the five note operations.
How:   Translates validated request payloads into repository calls and
       repository records into transfer shapes.
Who:   Called by route handlers; calls a NoteRepository.
When:  Once per note request.

Responsibilities:
    - Content normalization: absent/"" content is persisted as None, and
      None is returned to clients as ""
    - Existence checks: a missing note on get/update/remove raises
      NotFoundError
    - Storage faults: SQLAlchemyError is logged and re-raised as
      DatabaseError

Design Decision:
    NoteService holds only its repository. FastAPI builds a new one per
    request from the request's session (see get_note_service below), and
    tests hand it an in-memory repository instead.
"""

import logging
from uuid import UUID

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notekeeper.database import get_db_session
from notekeeper.exceptions import DatabaseError, NotFoundError
from notekeeper.models.note import Note
from notekeeper.repositories.note_repository import (
    NoteRepository,
    SQLAlchemyNoteRepository,
)
from notekeeper.schemas.note import (
    DeleteResponse,
    NoteCreate,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
)

logger = logging.getLogger(__name__)


def to_response(note: Note) -> NoteResponse:
    """Builds the transfer shape; a NULL content becomes ""."""
    return NoteResponse(
        id=note.id,
        title=note.title,
        content=note.content if note.content is not None else "",
    )


class NoteService:
    """
    Note Store: list, create, get, update and remove notes.

    Error Handling Strategy:
        NotFoundError propagates as-is (404). Any SQLAlchemyError from the
        repository is wrapped in DatabaseError (500) so that driver details
        never reach the client.
    """

    def __init__(self, repository: NoteRepository) -> None:
        self.repository = repository

    async def list_notes(self) -> NoteListResponse:
        """
        Return every note ordered by title ascending.

        Ties on title keep whatever order the database returns.
        """
        try:
            notes = await self.repository.list_all()
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        return NoteListResponse(items=[to_response(note) for note in notes])

    async def create_note(self, payload: NoteCreate) -> NoteResponse:
        """
        Persist a new note.

        Args:
            payload: Validated POST body; `title` is non-empty

        Returns:
            NoteResponse with the generated id
        """
        try:
            note = await self.repository.insert(
                title=payload.title,
                content=payload.content or None,
            )
        except SQLAlchemyError as e:
            logger.error("Database error creating note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the note. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Note created: %s", note.id)
        return to_response(note)

    async def get_note(self, note_id: UUID) -> NoteResponse:
        """
        Retrieve a single note by id.

        Raises:
            NotFoundError: No note has this id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            note = await self.repository.find_by_id(note_id)
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": str(note_id)},
            ) from e

        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))
        return to_response(note)

    async def update_note(self, note_id: UUID, payload: NoteUpdate) -> NoteResponse:
        """
        Partially update a note.

        Only the fields present in the request body are written. A supplied
        empty or null `content` clears the stored content; an omitted
        `content` leaves it unchanged. The same holds for `title`, except
        that a null title is treated as omitted.

        Raises:
            NotFoundError: No note has this id (→ 404)
            DatabaseError: Statement execution failed (→ 500)
        """
        changes = payload.changes()
        try:
            note = await self.repository.merge_and_fetch(note_id, changes)
        except SQLAlchemyError as e:
            logger.error("Database error updating note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": str(note_id)},
            ) from e

        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))

        logger.info("Note updated: %s (fields=%s)", note_id, sorted(changes))
        return to_response(note)

    async def remove_note(self, note_id: UUID) -> DeleteResponse:
        """
        Physically delete a note.

        Raises:
            NotFoundError: Nothing was deleted (→ 404)
            DatabaseError: Statement execution failed (→ 500)
        """
        try:
            deleted = await self.repository.delete_by_id(note_id)
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": str(note_id)},
            ) from e

        if deleted == 0:
            raise NotFoundError(resource="note", resource_id=str(note_id))

        logger.info("Note deleted: %s", note_id)
        return DeleteResponse(success=True)


# ── FastAPI Dependency ────────────────────────────────────────────────────
def get_note_service(db: AsyncSession = Depends(get_db_session)) -> NoteService:
    """Binds a NoteService to the request's database session."""
    return NoteService(SQLAlchemyNoteRepository(db))
