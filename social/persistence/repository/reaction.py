"""PostgreSQL implementation of Reaction repository."""

from collections import defaultdict
from typing import Dict, List, Optional, Sequence

from sqlalchemy import desc, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model import Reaction, ReactionCount
from social.domain.repository import ReactionRepository
from social.domain.value import (
    CommentId,
    EmojiName,
    EmojiUnicode,
    ReactionId,
    UserId,
)
from social.persistence.mappers import row_to_reaction
from social.persistence.tables import reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[Reaction]:
        """Find a user's reaction on a comment."""
        stmt = (
            select(reactions_table)
            .where(reactions_table.c.user_id == user_id)
            .where(reactions_table.c.comment_id == comment_id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reaction(row._asdict()) if row else None

    async def create(
        self,
        user_id: UserId,
        comment_id: CommentId,
        emoji_name: EmojiName,
        emoji_unicode: EmojiUnicode,
    ) -> Optional[Reaction]:
        """Insert a reaction; None if the user already reacted to the comment."""
        stmt = (
            insert(reactions_table)
            .values(
                user_id=user_id,
                comment_id=comment_id,
                emoji_name=emoji_name.root,
                emoji_unicode=emoji_unicode.root,
            )
            .on_conflict_do_nothing(
                index_elements=[reactions_table.c.user_id, reactions_table.c.comment_id]
            )
            .returning(reactions_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None
        await self.session.flush()
        return row_to_reaction(row._asdict())

    async def update_emoji(
        self,
        reaction_id: ReactionId,
        emoji_name: EmojiName,
        emoji_unicode: EmojiUnicode,
    ) -> Optional[Reaction]:
        """Replace the emoji of an existing reaction."""
        stmt = (
            update(reactions_table)
            .where(reactions_table.c.id == reaction_id)
            .values(emoji_name=emoji_name.root, emoji_unicode=emoji_unicode.root)
            .returning(reactions_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None
        await self.session.flush()
        return row_to_reaction(row._asdict())

    async def delete(self, reaction_id: ReactionId) -> None:
        """Delete a reaction."""
        stmt = reactions_table.delete().where(reactions_table.c.id == reaction_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, List[ReactionCount]]:
        """Tally reactions per comment and emoji name in one grouped query."""
        if not comment_ids:
            return {}

        count = func.count(reactions_table.c.id).label("count")
        stmt = (
            select(reactions_table.c.comment_id, reactions_table.c.emoji_name, count)
            .where(reactions_table.c.comment_id.in_(set(comment_ids)))
            .group_by(reactions_table.c.comment_id, reactions_table.c.emoji_name)
            .order_by(
                reactions_table.c.comment_id,
                desc(count),
                reactions_table.c.emoji_name,
            )
        )
        result = await self.session.execute(stmt)

        counts: Dict[CommentId, List[ReactionCount]] = defaultdict(list)
        for row in result.fetchall():
            counts[CommentId(row.comment_id)].append(
                ReactionCount(emoji_name=row.emoji_name, count=row.count)
            )
        return dict(counts)
