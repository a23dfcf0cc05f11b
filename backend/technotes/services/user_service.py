"""
TechNotes Backend: User Service
===============================

What:  Business rules for listing, creating, updating and deleting users.
How:   Works through UserRepository, hashes passwords with a PasswordHasher,
       and asks NoteRepository one question on delete: does this user still
       own a note?
Who:   Called by the /users route handlers.

Rules:
    - list_all(): never exposes password hashes; empty collection is an error
    - username is unique (case-sensitive); update excludes the user being edited
    - passwords are stored only as bcrypt hashes; update re-hashes only when a
      non-empty password is supplied
    - delete() is refused while any note references the user
"""

import logging
from typing import List, Optional
from uuid import UUID

from technotes.exceptions import ConflictError, NotFoundError, RejectedWrite, UniqueViolation, ValidationError
from technotes.repositories.note_repository import NoteRepository
from technotes.repositories.user_repository import UserRepository
from technotes.schemas.common import MessageResponse
from technotes.schemas.user import UserCreate, UserResponse, UserUpdate
from technotes.services.password_hasher import PasswordHasher, password_hasher

logger = logging.getLogger(__name__)

DUPLICATE_USERNAME = "Duplicate username"


class UserService:
    """
    Business logic layer for user operations.

    Args:
        hasher: PasswordHasher used on create and password rotation
                (defaults to the bcrypt singleton)
    """

    def __init__(self, hasher: Optional[PasswordHasher] = None):
        self.hasher = hasher or password_hasher

    async def list_all(self, users: UserRepository) -> List[UserResponse]:
        """
        Return every user, without password hashes.

        Raises:
            NotFoundError: The users collection is empty
        """
        records = await users.find_all()
        if not records:
            raise NotFoundError("No users found", resource="user")
        return [UserResponse.model_validate(user) for user in records]

    async def create(self, users: UserRepository, payload: UserCreate) -> MessageResponse:
        """
        Create an active user with a hashed password.

        Raises:
            ConflictError: Username already taken (→ 409)
            ValidationError: Password too long for bcrypt, or the database
                             refused the row (→ 400)
        """
        if await users.find_by_username(payload.username) is not None:
            raise ConflictError(DUPLICATE_USERNAME, field="username")

        hashed = await self.hasher.hash(payload.password)

        try:
            user = await users.create(
                username=payload.username,
                password=hashed,
                roles=list(payload.roles),
                active=True,
            )
        except UniqueViolation:
            raise ConflictError(DUPLICATE_USERNAME, field="username")
        except RejectedWrite:
            raise ValidationError("Invalid user data received")

        logger.info("User created: %s (%s)", user.id, user.username)
        return MessageResponse(message=f"New user {user.username} created")

    async def update(self, users: UserRepository, payload: UserUpdate) -> MessageResponse:
        """
        Replace username, roles and active; rotate the password if one is given.

        Raises:
            NotFoundError: No user with payload.id (→ 400)
            ConflictError: A different user holds payload.username (→ 409)
        """
        user = await users.find_by_id(payload.id)
        if user is None:
            raise NotFoundError("User not found", resource="user", resource_id=str(payload.id))

        duplicate = await users.find_by_username(payload.username)
        if duplicate is not None and duplicate.id != user.id:
            raise ConflictError(DUPLICATE_USERNAME, field="username")

        user.username = payload.username
        user.roles = list(payload.roles)
        user.active = payload.active

        if payload.password:
            user.password = await self.hasher.hash(payload.password)
            logger.info("Password rotated for user %s", user.id)

        try:
            updated = await users.save(user)
        except UniqueViolation:
            raise ConflictError(DUPLICATE_USERNAME, field="username")
        except RejectedWrite:
            raise ValidationError("Invalid user data received")

        logger.info("User updated: %s", updated.id)
        return MessageResponse(message=f"{updated.username} updated")

    async def delete(
        self,
        users: UserRepository,
        notes: NoteRepository,
        user_id: UUID,
    ) -> MessageResponse:
        """
        Delete a user who owns no notes.

        The ownership check runs first, so a user with notes gets a 409 even
        before existence is checked.

        Raises:
            ConflictError: At least one note references user_id (→ 409)
            NotFoundError: No user with user_id (→ 400)
        """
        if await notes.find_any_by_owner(user_id) is not None:
            logger.info("Refusing to delete user %s: notes still assigned", user_id)
            raise ConflictError("User has assigned notes", context={"user_id": str(user_id)})

        user = await users.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found", resource="user", resource_id=str(user_id))

        removed = await users.delete(user)
        logger.info("User deleted: %s (%s)", removed["id"], removed["username"])
        return MessageResponse(message=f"User {removed['username']} with ID {removed['id']} deleted")


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
