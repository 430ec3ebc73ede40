"""In-memory media repository for testing."""

from typing import Dict, Sequence

from social.domain.model.media import Media
from social.domain.repository.media import MediaRepository
from social.domain.value import CommentId

from .database import InMemoryDatabase


class InMemoryMediaRepository(MediaRepository):
    """In-memory implementation of MediaRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, Media]:
        """Batch lookup of the attachment for each comment."""
        wanted = set(comment_ids)
        attachments: Dict[CommentId, Media] = {}
        for media in sorted(self._db.media.values(), key=lambda m: m.id):
            if media.comment_id in wanted:
                attachments.setdefault(media.comment_id, media)
        return attachments
