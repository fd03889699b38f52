"""
NoteKeeper Backend - Notes Route Handlers
===========================================

What:  The five CRUD endpoints of the `notes` resource.
How:   FastAPI validates the path id (UUID) and body (NoteCreate/NoteUpdate)
       before the handler runs; each handler makes exactly one service call.
Who:   Any HTTP client of the notes API.

Path ids must be in the hyphenated 8-4-4-4-12 hex form; the 32-hex,
braced and urn:uuid: spellings are rejected like any other malformed id.

Validation failures (malformed UUID, unknown or mistyped body fields, empty
title) are answered with 400 by the RequestValidationError handler in
main.py; the service is never invoked for them.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status

from notekeeper.schemas.note import (
    DeleteResponse,
    ErrorResponse,
    NoteCreate,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
)
from notekeeper.services.note_service import NoteService, get_note_service

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/notes", tags=["Notes"])

_BAD_REQUEST = {400: {"description": "Validation failed", "model": ErrorResponse}}
_NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}
_SERVER_ERROR = {500: {"description": "Server error", "model": ErrorResponse}}

UUID_PATTERN = (
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

NoteId = Annotated[
    str,
    Path(pattern=UUID_PATTERN, description="Note UUID, e.g. 3f0c7d9e-1b2a-4c5d-8e6f-0a1b2c3d4e5f"),
]


@router.get(
    "",
    response_model=NoteListResponse,
    status_code=status.HTTP_200_OK,
    responses={**_SERVER_ERROR},
    summary="List all notes ordered by title",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> NoteListResponse:
    return await service.list_notes()


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, **_SERVER_ERROR},
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """
    Create a note from `{title, content?}`.

    Omitted or empty content is returned as "".
    """
    return await service.create_note(payload)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    status_code=status.HTTP_200_OK,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Get a single note by ID",
)
async def get_note(
    note_id: NoteId,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return await service.get_note(UUID(note_id))


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    status_code=status.HTTP_200_OK,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Update a note's title and/or content",
)
async def update_note(
    note_id: NoteId,
    payload: NoteUpdate,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """
    Partially update a note.

    Fields left out of the body keep their stored values.
    """
    return await service.update_note(UUID(note_id), payload)


@router.delete(
    "/{note_id}",
    response_model=DeleteResponse,
    status_code=status.HTTP_200_OK,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete a note",
)
async def delete_note(
    note_id: NoteId,
    service: NoteService = Depends(get_note_service),
) -> DeleteResponse:
    return await service.remove_note(UUID(note_id))
