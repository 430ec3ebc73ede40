"""In-memory reaction repository for testing."""

from collections import Counter
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from social.domain.model.reaction import Reaction, ReactionCount
from social.domain.repository.reaction import ReactionRepository
from social.domain.value import (
    CommentId,
    EmojiName,
    EmojiUnicode,
    ReactionId,
    UserId,
)

from .database import InMemoryDatabase


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Reaction]:
        """Find a user's reaction on a comment."""
        for reaction in self._db.reactions.values():
            if reaction.user_id == user_id and reaction.comment_id == comment_id:
                return reaction
        return None

    async def create(
        self,
        user_id: UserId,
        comment_id: CommentId,
        emoji_name: EmojiName,
        emoji_unicode: EmojiUnicode,
    ) -> Optional[Reaction]:
        """Insert a reaction; None if the user already reacted to the comment."""
        if await self.find_by_user_and_comment(user_id, comment_id) is not None:
            return None

        reaction = Reaction(
            id=ReactionId(self._db.next_id("reactions")),
            user_id=user_id,
            comment_id=comment_id,
            emoji_name=emoji_name,
            emoji_unicode=emoji_unicode,
            created_at=datetime.now(timezone.utc),
        )
        self._db.reactions[reaction.id] = reaction
        return reaction

    async def update_emoji(
        self,
        reaction_id: ReactionId,
        emoji_name: EmojiName,
        emoji_unicode: EmojiUnicode,
    ) -> Optional[Reaction]:
        """Replace the emoji of an existing reaction."""
        existing = self._db.reactions.get(reaction_id)
        if existing is None:
            return None
        updated = existing.model_copy(
            update={"emoji_name": emoji_name, "emoji_unicode": emoji_unicode}
        )
        self._db.reactions[reaction_id] = updated
        return updated

    async def delete(self, reaction_id: ReactionId) -> None:
        """Delete a reaction."""
        self._db.reactions.pop(reaction_id, None)

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, List[ReactionCount]]:
        """Tally reactions per comment and emoji name."""
        wanted = set(comment_ids)
        tallies: Dict[CommentId, Counter[str]] = {}
        for reaction in self._db.reactions.values():
            if reaction.comment_id in wanted:
                tallies.setdefault(reaction.comment_id, Counter())[
                    reaction.emoji_name.root
                ] += 1

        return {
            comment_id: [
                ReactionCount(emoji_name=name, count=n)
                for name, n in sorted(tally.items(), key=lambda kv: (-kv[1], kv[0]))
            ]
            for comment_id, tally in tallies.items()
        }
