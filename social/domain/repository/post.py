"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from social.domain.model.post import Post
from social.domain.value import PostId


class PostRepository(ABC):
    """Read access to posts; posts are written by the posts service."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, published or not."""
        pass
