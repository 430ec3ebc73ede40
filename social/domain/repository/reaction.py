"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from social.domain.model.reaction import Reaction, ReactionCount
from social.domain.value import (
    CommentId,
    EmojiName,
    EmojiUnicode,
    ReactionId,
    UserId,
)


class ReactionRepository(ABC):
    """Repository for Reaction entity."""

    @abstractmethod
    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Reaction]:
        """Find a user's reaction on a comment.

        Args:
            user_id: The user's ID
            comment_id: The comment's ID

        Returns:
            The reaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(
        self,
        user_id: UserId,
        comment_id: CommentId,
        emoji_name: EmojiName,
        emoji_unicode: EmojiUnicode,
    ) -> Optional[Reaction]:
        """Insert a reaction unless the user already holds one on the comment.

        Returns:
            The stored reaction with its assigned ID, or None if another
            reaction by the same user on the same comment already exists
        """
        pass

    @abstractmethod
    async def update_emoji(
        self,
        reaction_id: ReactionId,
        emoji_name: EmojiName,
        emoji_unicode: EmojiUnicode,
    ) -> Optional[Reaction]:
        """Replace the emoji of an existing reaction.

        Returns:
            Updated reaction, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, reaction_id: ReactionId) -> None:
        """Delete a reaction.

        Args:
            reaction_id: The reaction ID to delete
        """
        pass

    @abstractmethod
    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, List[ReactionCount]]:
        """Tally reactions per comment and emoji name in one grouped read.

        Args:
            comment_ids: Comments to tally

        Returns:
            Mapping of comment ID to tallies ordered by count descending,
            then emoji name. Comments without reactions are absent.
        """
        pass
