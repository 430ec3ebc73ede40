"""In-memory post repository for testing."""

from typing import Optional

from social.domain.model.post import Post
from social.domain.repository.post import PostRepository
from social.domain.value import PostId

from .database import InMemoryDatabase


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._db.posts.get(post_id)
