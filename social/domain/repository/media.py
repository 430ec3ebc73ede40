"""Media repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, Sequence

from social.domain.model.media import Media
from social.domain.value import CommentId


class MediaRepository(ABC):
    """Read access to comment attachments; uploads live elsewhere."""

    @abstractmethod
    async def find_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> Dict[CommentId, Media]:
        """Batch lookup of the attachment for each comment.

        When a comment has several attachments the oldest (lowest ID) wins.

        Returns:
            Mapping of comment ID to its attachment; comments without one are absent
        """
        pass
