"""In-memory user repository for testing."""

from typing import Dict, Sequence

from social.domain.model.user import User
from social.domain.repository.user import UserRepository
from social.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> Dict[UserId, User]:
        """Batch lookup of users."""
        return {
            user_id: self._db.users[user_id]
            for user_id in user_ids
            if user_id in self._db.users
        }
