"""PostgreSQL implementation of Comment repository."""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy import asc, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model import Comment
from social.domain.repository import CommentRepository
from social.domain.value import CommentId, CommentSort, PostId, UserId
from social.persistence.mappers import row_to_comment
from social.persistence.tables import comments_table


def _creation_order(sort: CommentSort) -> tuple:
    direction = desc if sort.descending else asc
    return (
        direction(comments_table.c.created_at),
        direction(comments_table.c.id),
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level_by_post(
        self,
        post_id: PostId,
        sort: CommentSort = CommentSort.OLDEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of published root comments for a post."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.is_published.is_(True))
            .order_by(*_creation_order(sort))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_top_level_by_post(self, post_id: PostId) -> int:
        """Count published root comments for a post."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.is_published.is_(True))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_descendants(
        self,
        root_ids: Sequence[CommentId],
        sort: CommentSort = CommentSort.OLDEST,
    ) -> List[Comment]:
        """Find every published reply below the given comments.

        A recursive CTE walks down from the roots, stopping at unpublished
        comments, so the whole subtree comes back in one round trip.
        """
        if not root_ids:
            return []

        subtree = (
            select(comments_table.c.id)
            .where(comments_table.c.parent_id.in_(root_ids))
            .where(comments_table.c.is_published.is_(True))
            .cte("subtree", recursive=True)
        )
        children = comments_table.alias("children")
        subtree = subtree.union_all(
            select(children.c.id)
            .join(subtree, children.c.parent_id == subtree.c.id)
            .where(children.c.is_published.is_(True))
        )

        stmt = (
            select(comments_table)
            .join(subtree, comments_table.c.id == subtree.c.id)
            .order_by(*_creation_order(sort))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies(
        self,
        parent_id: CommentId,
        sort: CommentSort = CommentSort.OLDEST,
        limit: int = 20,
    ) -> List[Comment]:
        """Find published direct replies to a comment."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .where(comments_table.c.is_published.is_(True))
            .order_by(*_creation_order(sort))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_children(self, comment_id: CommentId) -> int:
        """Count direct replies to a comment."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def create(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment."""
        stmt = (
            comments_table.insert()
            .values(
                post_id=post_id,
                author_id=author_id,
                parent_id=parent_id,
                content=content,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                content=content,
                updated_at=datetime.now(timezone.utc),
            )
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (subtree, reactions and media cascade)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
