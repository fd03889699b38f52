"""
NoteKeeper Backend - Note SQLAlchemy Model
============================================

What:  ORM model representing the `notes` table.
How:   Inherits from SQLAlchemy's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by SQLAlchemyNoteRepository for CRUD statements.

Table Design:
    - id: UUID generated in Python at insert time, so the same model works on
      SQLite (stored as CHAR(32)) and PostgreSQL (native UUID)
    - title: VARCHAR(255), NOT NULL
    - content: TEXT, nullable; NULL is the "no content" state

    Index on title:
        The list endpoint always orders by title ascending.
"""

import uuid
from typing import Optional

from sqlalchemy import Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from notekeeper.database import Base


class Note(Base):
    """
    A single note row.

    Lifecycle:
        1. Inserted by a create call (id generated, content NULL if absent)
        2. Mutated in place by update calls; id never changes
        3. Physically deleted by a delete call

    Query Patterns:
        - List:        SELECT ... ORDER BY title ASC
        - Get by id:   SELECT ... WHERE id = :uuid
        - Delete:      DELETE FROM notes WHERE id = :uuid
    """

    __tablename__ = "notes"

    # ── Primary Key ───────────────────────────────────────────────────────
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier (random UUID4)",
    )

    # ── Title ─────────────────────────────────────────────────────────────
    # Non-empty is enforced by the request schemas; the column only
    # guarantees presence and length
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Note title, 1-255 characters",
    )

    # ── Content ───────────────────────────────────────────────────────────
    # NULL means "no content"; the API always returns it as ""
    content: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Free-form note body, NULL when empty",
    )

    __table_args__ = (
        Index("idx_notes_title", "title"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}')>"
