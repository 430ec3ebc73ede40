"""In-memory comment repository for testing."""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from social.domain.model.comment import Comment
from social.domain.repository.comment import CommentRepository
from social.domain.value import CommentId, CommentSort, PostId, UserId

from .database import InMemoryDatabase


def _sorted(comments: list[Comment], sort: CommentSort) -> list[Comment]:
    return sorted(
        comments, key=lambda c: (c.created_at, c.id), reverse=sort.descending
    )


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._db.comments.get(comment_id)

    async def find_top_level_by_post(
        self,
        post_id: PostId,
        sort: CommentSort = CommentSort.OLDEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of published root comments for a post."""
        roots = [
            c
            for c in self._db.comments.values()
            if c.post_id == post_id and c.parent_id is None and c.is_published
        ]
        return _sorted(roots, sort)[offset : offset + limit]

    async def count_top_level_by_post(self, post_id: PostId) -> int:
        """Count published root comments for a post."""
        return sum(
            1
            for c in self._db.comments.values()
            if c.post_id == post_id and c.parent_id is None and c.is_published
        )

    async def find_descendants(
        self,
        root_ids: Sequence[CommentId],
        sort: CommentSort = CommentSort.OLDEST,
    ) -> List[Comment]:
        """Walk down from the roots, stopping at unpublished comments."""
        found: list[Comment] = []
        seen: set[CommentId] = set(root_ids)
        frontier = list(root_ids)
        while frontier:
            parent_id = frontier.pop()
            for comment in self._db.comments.values():
                if (
                    comment.parent_id == parent_id
                    and comment.is_published
                    and comment.id not in seen
                ):
                    seen.add(comment.id)
                    found.append(comment)
                    frontier.append(comment.id)
        return _sorted(found, sort)

    async def find_replies(
        self,
        parent_id: CommentId,
        sort: CommentSort = CommentSort.OLDEST,
        limit: int = 20,
    ) -> List[Comment]:
        """Find published direct replies to a comment."""
        replies = [
            c
            for c in self._db.comments.values()
            if c.parent_id == parent_id and c.is_published
        ]
        return _sorted(replies, sort)[:limit]

    async def count_children(self, comment_id: CommentId) -> int:
        """Count direct replies to a comment."""
        return sum(1 for c in self._db.comments.values() if c.parent_id == comment_id)

    async def create(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment."""
        now = datetime.now(timezone.utc)
        comment = Comment(
            id=CommentId(self._db.next_id("comments")),
            post_id=post_id,
            author_id=author_id,
            parent_id=parent_id,
            content=content,
            created_at=now,
            updated_at=now,
        )
        self._db.comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content."""
        existing = self._db.comments.get(comment_id)
        if existing is None:
            return None
        updated = existing.model_copy(
            update={"content": content, "updated_at": datetime.now(timezone.utc)}
        )
        self._db.comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and cascade like the foreign keys do."""
        self._db.delete_comment_subtree(comment_id)
