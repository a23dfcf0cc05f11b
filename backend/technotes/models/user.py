"""
TechNotes Backend: User SQLAlchemy Model
=========================================

What:  ORM model representing the `users` table.
Who:   Used by UserRepository for CRUD operations and by Alembic for schema management.

Table Design:
    - UUID primary key, generated in Python so SQLite and PostgreSQL behave alike
    - username: unique index; the index is what actually guarantees uniqueness,
      the service-level duplicate check only produces the friendly message
    - password: bcrypt hash (60 chars), never the plaintext
    - roles: JSON array of role tags ("Employee", "Manager", "Admin")
    - active: soft-disable flag, true on creation
"""

import uuid
from datetime import datetime, timezone
from typing import List

from sqlalchemy import JSON, Boolean, DateTime, String, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from technotes.database import Base

DEFAULT_ROLES = ["Employee"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    """
    A person who can own notes.

    Lifecycle:
        1. Created with a hashed password and at least one role (active=True)
        2. Replaced wholesale on update; the hash changes only when a new
           password is supplied
        3. Deleted only once no note references it
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    username: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="Login name, unique across all users",
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt hash of the user's password",
    )

    roles: Mapped[List[str]] = mapped_column(
        JSON,
        nullable=False,
        default=lambda: list(DEFAULT_ROLES),
        comment="Role tags; never empty",
    )

    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
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
        return f"<User(id={self.id}, username='{self.username}', active={self.active})>"
