"""
NoteKeeper Backend - Custom Exception Hierarchy
=================================================

What:  Defines application-specific exceptions for the error kinds the API
       can surface.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and routes; caught by global handlers.

Exception Hierarchy:
    NoteKeeperError (base)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error (storage fault)

Client input errors have no class here: request bodies and path parameters
are validated by Pydantic before any service code runs, and FastAPI's
RequestValidationError is mapped to 400 in main.py.
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, and only returned for 4xx errors)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(NoteKeeperError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /notes/{id} with a UUID that matches no row.
    HTTP:    404 Not Found

    The repository reports a missing row as None (or zero affected rows);
    the service turns that into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(NoteKeeperError):
    """
    Raised when database operations fail unexpectedly.

    What:    A query, insert, update or delete failed at the storage layer.
    When:    Connection lost, database unreachable, constraint violation.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. Details such as
    the original exception type are kept in `context` and logged server-side.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
