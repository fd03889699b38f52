# Schemas package init
"""
NoteKeeper Backend - Schemas Package
======================================

What:  Pydantic models that define request bodies and response shapes.

Inventory:
    - note.py: NoteCreate/NoteUpdate (strict request whitelists), NoteResponse,
               NoteListResponse, DeleteResponse, ErrorResponse, HealthResponse
"""
