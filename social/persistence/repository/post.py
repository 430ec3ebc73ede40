"""PostgreSQL implementation of Post repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model import Post
from social.domain.repository import PostRepository
from social.domain.value import PostId
from social.persistence.mappers import row_to_post
from social.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        row = (await self.session.execute(stmt)).one_or_none()
        return row_to_post(row._asdict()) if row else None
