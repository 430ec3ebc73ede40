"""PostgreSQL implementation of Media repository."""

from typing import Dict, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from social.domain.model import Media
from social.domain.repository import MediaRepository
from social.domain.value import CommentId
from social.persistence.mappers import row_to_media
from social.persistence.tables import media_table


class PostgresMediaRepository(MediaRepository):
    """PostgreSQL implementation of MediaRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, Media]:
        """Batch lookup of the attachment for each comment."""
        if not comment_ids:
            return {}
        stmt = (
            select(media_table)
            .where(media_table.c.comment_id.in_(set(comment_ids)))
            .order_by(media_table.c.id)
        )
        result = await self.session.execute(stmt)
        attachments: Dict[CommentId, Media] = {}
        for row in result.fetchall():
            media = row_to_media(row._asdict())
            # First attachment wins when a comment has several
            attachments.setdefault(media.comment_id, media)
        return attachments
