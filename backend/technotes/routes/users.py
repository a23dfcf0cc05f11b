"""
TechNotes Backend: Users Route Handlers
=======================================

What:  GET/POST/PATCH/DELETE /users.
How:   Same shape as the notes routes. DELETE also hands UserService a
       NoteRepository so it can refuse to remove a user who still owns notes.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from technotes.database import get_db_session
from technotes.repositories.note_repository import NoteRepository
from technotes.repositories.user_repository import UserRepository
from technotes.schemas.common import ErrorResponse, MessageResponse
from technotes.schemas.user import UserCreate, UserDelete, UserResponse, UserUpdate
from technotes.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=List[UserResponse],
    responses={400: {"description": "No users found", "model": ErrorResponse}},
    summary="List all users (passwords never included)",
)
async def list_users(db: AsyncSession = Depends(get_db_session)) -> List[UserResponse]:
    return await user_service.list_all(UserRepository(db))


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing or invalid fields", "model": ErrorResponse},
        409: {"description": "Duplicate username", "model": ErrorResponse},
    },
    summary="Create a user",
)
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await user_service.create(UserRepository(db), payload)


@router.patch(
    "",
    response_model=MessageResponse,
    responses={
        400: {"description": "Missing fields or unknown user", "model": ErrorResponse},
        409: {"description": "Duplicate username", "model": ErrorResponse},
    },
    summary="Replace a user's username, roles and active flag; optionally rotate the password",
)
async def update_user(
    payload: UserUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await user_service.update(UserRepository(db), payload)


@router.delete(
    "",
    response_model=MessageResponse,
    responses={
        400: {"description": "Missing id or unknown user", "model": ErrorResponse},
        409: {"description": "User has assigned notes", "model": ErrorResponse},
    },
    summary="Delete a user who owns no notes",
)
async def delete_user(
    payload: UserDelete,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await user_service.delete(UserRepository(db), NoteRepository(db), payload.id)
