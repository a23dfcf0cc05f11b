"""
TechNotes Backend: Note Request/Response Schemas
================================================

What:  One request model per note operation plus the listed-note projection.

Field rules:
    - user: id of the owning user (not checked for existence on create)
    - title / text: present and non-empty
    - completed: required on update and must be a JSON boolean
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, StrictBool


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /notes. New notes always start with completed=false."""
    user: uuid.UUID
    title: str = Field(min_length=1, max_length=255)
    text: str = Field(min_length=1)


class NoteUpdate(BaseModel):
    """Body of PATCH /notes. Full replace: all five fields are required."""
    id: uuid.UUID
    user: uuid.UUID
    title: str = Field(min_length=1, max_length=255)
    text: str = Field(min_length=1)
    completed: StrictBool


class NoteDelete(BaseModel):
    """Body of DELETE /notes."""
    id: uuid.UUID


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    A note as listed by GET /notes, with the owner's username joined in.

    username is null when the owning user no longer exists.
    """
    id: uuid.UUID
    user: uuid.UUID
    title: str
    text: str
    completed: bool
    created_at: datetime
    updated_at: datetime
    username: Optional[str] = Field(default=None, description="Owner's username")

    model_config = {"from_attributes": True}
