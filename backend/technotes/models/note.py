"""
TechNotes Backend: Note SQLAlchemy Model
=========================================

What:  ORM model representing the `notes` table.
Who:   Used by NoteRepository for CRUD operations and by Alembic for schema management.

Table Design:
    - title: unique across ALL notes, not per user
    - user (column `user_id`): id of the owning user. There is no foreign key:
      the ownership rule is enforced by UserService refusing to delete a user
      who still has notes, and note creation does not check that the user exists
    - completed: plain flag, false on creation

    Index on user_id:
        Serves the "does this user own any notes?" lookup run on every user delete.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String, Text, Uuid
from sqlalchemy import text as sql_text
from sqlalchemy.orm import Mapped, mapped_column

from technotes.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A task-style note owned by exactly one user.

    Query Patterns:
        - List all notes: SELECT * FROM notes
        - Duplicate title check: SELECT ... WHERE title = :title (unique index)
        - Ownership check: SELECT ... WHERE user_id = :user LIMIT 1 (idx on user_id)
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    user: Mapped[uuid.UUID] = mapped_column(
        "user_id",
        Uuid,
        nullable=False,
        index=True,
        comment="Owning user's id (no foreign key, no cascade)",
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Note title, unique across all notes",
    )

    text: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    completed: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=sql_text("false"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}', completed={self.completed})>"
