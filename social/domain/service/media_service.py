"""Media domain service."""

from typing import Sequence

import logfire

from social.domain.model import Media
from social.domain.repository import MediaRepository
from social.domain.value import CommentId

from .base import Service


class MediaService(Service):
    """Domain service for comment attachments."""

    def __init__(self, media_repository: MediaRepository) -> None:
        self.media_repository = media_repository

    async def get_for_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, Media]:
        """Batch lookup of the attachment for each comment."""
        if not comment_ids:
            return {}
        with logfire.span("media_service.get_for_comments", count=len(comment_ids)):
            return await self.media_repository.find_by_comment_ids(comment_ids)
