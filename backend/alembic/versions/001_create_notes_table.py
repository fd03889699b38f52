"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `notes` table: UUID id, VARCHAR(255) title, nullable TEXT content.
Rollback: downgrade() drops the table (all notes are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the notes table and its title index (see notekeeper/models/note.py)."""
    op.create_table(
        "notes",
        # Generated by the application (uuid4), not by the database
        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            nullable=False,
            comment="Unique identifier (random UUID4)",
        ),
        sa.Column(
            "title",
            sa.String(255),
            nullable=False,
            comment="Note title, 1-255 characters",
        ),
        sa.Column(
            "content",
            sa.Text(),
            nullable=True,
            comment="Free-form note body, NULL when empty",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # GET /notes always sorts by title
    op.create_index("idx_notes_title", "notes", ["title"])


def downgrade() -> None:
    """Drop the notes table entirely."""
    op.drop_index("idx_notes_title", table_name="notes")
    op.drop_table("notes")
