"""
TechNotes Backend: Note Service
===============================

What:  Business rules for listing, creating, updating and deleting notes.
How:   Works only through NoteRepository (and UserRepository for the owner
       join). Request bodies arrive already validated by the schemas, so the
       checks here are the ones that need the database: existence and title
       uniqueness.
Who:   Called by the /notes route handlers.

Rules:
    - list_all(): an empty collection is an error ("No notes found"),
      not an empty list
    - title is unique across all notes (case-sensitive); update excludes
      the note being edited from the duplicate check
    - create() does not check that `user` refers to an existing user
    - delete() answers with the title and id captured from the removed row

Design Decision:
    NoteService is stateless. It receives its repositories for each call,
    so every call runs inside the request's own session.
"""

import logging
from typing import List
from uuid import UUID

from technotes.exceptions import ConflictError, NotFoundError, RejectedWrite, UniqueViolation, ValidationError
from technotes.repositories.note_repository import NoteRepository
from technotes.repositories.user_repository import UserRepository
from technotes.schemas.common import MessageResponse
from technotes.schemas.note import NoteCreate, NoteResponse, NoteUpdate

logger = logging.getLogger(__name__)

DUPLICATE_TITLE = "Duplicate note title"


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_all(): every note with its owner's username
        - create():   duplicate-title guard, completed=False on insert
        - update():   full replace of user/title/text/completed
        - delete():   remove and report what was removed
    """

    async def list_all(
        self,
        notes: NoteRepository,
        users: UserRepository,
    ) -> List[NoteResponse]:
        """
        Return every note with the owner's username attached.

        Owner lookups are independent reads. They are joined into a single
        `WHERE id IN (...)` query instead of one query per note; a note whose
        owner has disappeared is still listed, with username=None.

        Raises:
            NotFoundError: The notes collection is empty
        """
        records = await notes.find_all()
        if not records:
            raise NotFoundError("No notes found", resource="note")

        owners = await users.find_by_ids(note.user for note in records)
        usernames = {owner.id: owner.username for owner in owners}

        listed = []
        for note in records:
            item = NoteResponse.model_validate(note)
            item.username = usernames.get(note.user)
            if item.username is None:
                logger.warning("Note %s references missing user %s", note.id, note.user)
            listed.append(item)
        return listed

    async def create(self, notes: NoteRepository, payload: NoteCreate) -> MessageResponse:
        """
        Create a note owned by `payload.user`.

        Raises:
            ConflictError: Another note already has this title (→ 409)
            ValidationError: The database refused the row (→ 400)
        """
        if await notes.find_by_title(payload.title) is not None:
            raise ConflictError(DUPLICATE_TITLE, field="title")

        try:
            note = await notes.create(
                user=payload.user,
                title=payload.title,
                text=payload.text,
                completed=False,
            )
        except UniqueViolation:
            # Lost a race with a concurrent create of the same title
            raise ConflictError(DUPLICATE_TITLE, field="title")
        except RejectedWrite:
            raise ValidationError("Invalid note data received")

        logger.info("Note created: %s (%s) for user %s", note.id, note.title, note.user)
        return MessageResponse(message=f"New note {note.title} created")

    async def update(self, notes: NoteRepository, payload: NoteUpdate) -> MessageResponse:
        """
        Replace every mutable field of an existing note.

        Raises:
            NotFoundError: No note with payload.id (→ 400)
            ConflictError: A different note holds payload.title (→ 409)
        """
        note = await notes.find_by_id(payload.id)
        if note is None:
            raise NotFoundError("Note not found", resource="note", resource_id=str(payload.id))

        duplicate = await notes.find_by_title(payload.title)
        if duplicate is not None and duplicate.id != note.id:
            raise ConflictError(DUPLICATE_TITLE, field="title")

        note.user = payload.user
        note.title = payload.title
        note.text = payload.text
        note.completed = payload.completed

        try:
            updated = await notes.save(note)
        except UniqueViolation:
            raise ConflictError(DUPLICATE_TITLE, field="title")
        except RejectedWrite:
            raise ValidationError("Invalid note data received")

        logger.info("Note updated: %s", updated.id)
        return MessageResponse(message=f"'{updated.title}' updated")

    async def delete(self, notes: NoteRepository, note_id: UUID) -> MessageResponse:
        """
        Delete a note.

        Raises:
            NotFoundError: No note with note_id (→ 400)
        """
        note = await notes.find_by_id(note_id)
        if note is None:
            raise NotFoundError("Note not found", resource="note", resource_id=str(note_id))

        removed = await notes.delete(note)
        logger.info("Note deleted: %s (%s)", removed["id"], removed["title"])
        return MessageResponse(message=f"Note {removed['title']} with ID {removed['id']} deleted")


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
