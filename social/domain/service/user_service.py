"""User domain service."""

from typing import Sequence

import logfire

from social.domain.model import User
from social.domain.repository import UserRepository
from social.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for author lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_users(self, user_ids: Sequence[UserId]) -> dict[UserId, User]:
        """Batch lookup of comment authors.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of user ID to user; unknown IDs are absent
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        with logfire.span("user_service.get_users", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            if len(users) < len(unique_ids):
                logfire.warn(
                    "Some authors not found",
                    requested=len(unique_ids),
                    found=len(users),
                )
            return users
