"""Note collection gateway."""

from typing import Optional
from uuid import UUID

from technotes.models.note import Note
from technotes.repositories.base import Repository


class NoteRepository(Repository[Note]):
    model = Note

    async def find_by_title(self, title: str) -> Optional[Note]:
        """Exact, case-sensitive title match across all users' notes."""
        return await self.find_one(title=title)

    async def find_any_by_owner(self, user_id: UUID) -> Optional[Note]:
        """
        Any one note owned by `user_id`, or None.

        This is the only read UserService performs on the notes collection:
        it decides whether a user may be deleted.
        """
        return await self.find_one(user=user_id)
