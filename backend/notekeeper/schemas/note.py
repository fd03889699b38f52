"""
NoteKeeper Backend - Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract.
How:   FastAPI uses these models to validate request bodies, serialize
       responses, and generate OpenAPI documentation.

Request bodies are strict whitelists:
    - extra="forbid": unknown fields are rejected
    - StrictStr: recognized fields must already be JSON strings
      (a numeric title is an error, not coerced to "123")
    Both failures surface as HTTP 400 before the service is called.
"""

import uuid
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


TITLE_MAX_LENGTH = 255


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /notes.

    `content` is optional; omitted, null and "" are all stored as NULL.
    """
    model_config = ConfigDict(extra="forbid")

    title: StrictStr = Field(
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Note title (required, non-empty)",
    )
    content: Optional[StrictStr] = Field(default=None, description="Note body (optional)")


class NoteUpdate(BaseModel):
    """
    Body of PUT /notes/{id}.

    Both fields are optional. Only fields present in the request body are
    applied (see `changes()`); an omitted field keeps its stored value.
    """
    model_config = ConfigDict(extra="forbid")

    title: Optional[StrictStr] = Field(
        default=None,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Replacement title (non-empty if supplied)",
    )
    content: Optional[StrictStr] = Field(default=None, description="Replacement body")

    def changes(self) -> dict:
        """
        Returns the explicitly supplied fields, normalized for persistence.

        - title: applied only if supplied and not null
        - content: applied if supplied; "" and null both become None
        """
        supplied = self.model_fields_set
        result = {}
        if "title" in supplied and self.title is not None:
            result["title"] = self.title
        if "content" in supplied:
            result["content"] = self.content or None
        return result


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    Transfer shape of a note: `content` is always a string.
    """
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body, empty string when unset")


class NoteListResponse(BaseModel):
    """Returned by GET /notes, items ordered by title ascending."""
    items: List[NoteResponse] = Field(description="All notes")


class DeleteResponse(BaseModel):
    """Returned by DELETE /notes/{id}."""
    success: bool = Field(default=True, description="Always true on success")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "note with ID '3f0c...' was not found",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
