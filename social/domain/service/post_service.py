"""Post domain service."""

import logfire

from social.domain.error import NotFoundError
from social.domain.model.post import Post
from social.domain.repository import PostRepository
from social.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post lookups."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post(self, post_id: PostId) -> Post:
        """Get a visible post by ID.

        Unpublished posts are treated as missing.

        Args:
            post_id: Post ID

        Returns:
            Post entity

        Raises:
            NotFoundError: If the post doesn't exist or isn't published
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if post is None or not post.is_published:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", post_id)
            return post
