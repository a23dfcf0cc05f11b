"""User collection gateway."""

from typing import Optional

from technotes.models.user import User
from technotes.repositories.base import Repository


class UserRepository(Repository[User]):
    model = User

    async def find_by_username(self, username: str) -> Optional[User]:
        """Exact, case-sensitive username match."""
        return await self.find_one(username=username)
