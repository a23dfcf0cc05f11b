"""
TechNotes Backend: Notes Route Handlers
=======================================

What:  GET/POST/PATCH/DELETE /notes.
How:   Each handler builds the repositories for its request session and
       delegates to NoteService. Errors raised by the service are turned into
       JSON responses by the global handlers in main.py.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from technotes.database import get_db_session
from technotes.repositories.note_repository import NoteRepository
from technotes.repositories.user_repository import UserRepository
from technotes.schemas.common import ErrorResponse, MessageResponse
from technotes.schemas.note import NoteCreate, NoteDelete, NoteResponse, NoteUpdate
from technotes.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])

CLIENT_ERRORS = {
    400: {"description": "Invalid body or unknown note", "model": ErrorResponse},
    409: {"description": "Duplicate note title", "model": ErrorResponse},
}


@router.get(
    "",
    response_model=List[NoteResponse],
    responses={400: {"description": "No notes found", "model": ErrorResponse}},
    summary="List all notes with their owner's username",
)
async def list_notes(db: AsyncSession = Depends(get_db_session)) -> List[NoteResponse]:
    return await note_service.list_all(NoteRepository(db), UserRepository(db))


@router.post(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=CLIENT_ERRORS,
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await note_service.create(NoteRepository(db), payload)


@router.patch(
    "",
    response_model=MessageResponse,
    responses=CLIENT_ERRORS,
    summary="Replace a note's user, title, text and completed flag",
)
async def update_note(
    payload: NoteUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await note_service.update(NoteRepository(db), payload)


@router.delete(
    "",
    response_model=MessageResponse,
    responses={400: {"description": "Missing id or unknown note", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    payload: NoteDelete,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await note_service.delete(NoteRepository(db), payload.id)
