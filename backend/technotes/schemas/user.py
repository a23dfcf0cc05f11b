"""
TechNotes Backend: User Request/Response Schemas
================================================

What:  One request model per user operation plus the public user projection.
How:   FastAPI validates request bodies against these models before the
       service runs. Failures are re-raised as ValidationError (400) by the
       handler in main.py, so services only ever see complete, typed input.

Field rules:
    - username / password: present and non-empty
    - roles: a list with at least one entry
    - active: a real JSON boolean (StrictBool rejects "true", 1, etc.)
    - password on update: optional; omitted or "" keeps the stored hash
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, StrictBool


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class UserCreate(BaseModel):
    """Body of POST /users."""
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1)
    roles: List[str] = Field(min_length=1, description="At least one role tag")


class UserUpdate(BaseModel):
    """Body of PATCH /users. Every field but `password` is mandatory."""
    id: uuid.UUID
    username: str = Field(min_length=1, max_length=64)
    roles: List[str] = Field(min_length=1)
    active: StrictBool
    password: Optional[str] = Field(
        default=None,
        description="New plaintext password; omit to keep the current one",
    )


class UserDelete(BaseModel):
    """Body of DELETE /users."""
    id: uuid.UUID


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class UserResponse(BaseModel):
    """
    Public projection of a user. It has no `password` field:
    the hash never leaves the service layer.
    """
    id: uuid.UUID
    username: str
    roles: List[str]
    active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
