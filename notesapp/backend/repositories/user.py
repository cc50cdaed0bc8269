"""
User Repository.

Data access for the `users` table.
"""

from sqlalchemy import select

from notesapp.backend.models.user import UserRecord
from notesapp.backend.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserRecord]):
    """Repository for UserRecord."""

    model = UserRecord
    label = "User"

    async def get_by_email(self, email: str) -> UserRecord | None:
        """Look up a user by email address."""
        result = await self.session.execute(
            select(UserRecord).where(UserRecord.email == email)
        )
        return result.scalar_one_or_none()
