"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Sequence

from social.domain.model.user import User
from social.domain.value import UserId


class UserRepository(ABC):
    """Read access to the display attributes of comment authors."""

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> Dict[UserId, User]:
        """Batch lookup of users.

        Args:
            user_ids: User IDs to look up (duplicates allowed)

        Returns:
            Mapping of found user IDs to users; unknown IDs are absent
        """
        pass
