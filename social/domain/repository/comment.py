"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from social.domain.model.comment import Comment
from social.domain.value import CommentId, CommentSort, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, published or not.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level_by_post(
        self,
        post_id: PostId,
        sort: CommentSort = CommentSort.OLDEST,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find one page of published root comments for a post.

        Args:
            post_id: The post ID
            sort: Creation-time ordering
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Root comments ordered by creation time
        """
        pass

    @abstractmethod
    async def count_top_level_by_post(self, post_id: PostId) -> int:
        """Count published root comments for a post.

        Args:
            post_id: The post ID

        Returns:
            Number of published root comments
        """
        pass

    @abstractmethod
    async def find_descendants(
        self,
        root_ids: Sequence[CommentId],
        sort: CommentSort = CommentSort.OLDEST,
    ) -> List[Comment]:
        """Find every published reply below the given comments, at any depth.

        Must be a single batch read. Replies below an unpublished comment
        are not returned.

        Args:
            root_ids: Comments whose subtrees to load (not included in the result)
            sort: Creation-time ordering of the flat result

        Returns:
            Flat list of descendant comments
        """
        pass

    @abstractmethod
    async def find_replies(
        self,
        parent_id: CommentId,
        sort: CommentSort = CommentSort.OLDEST,
        limit: int = 20,
    ) -> List[Comment]:
        """Find published direct replies to a comment.

        Args:
            parent_id: The parent comment ID
            sort: Creation-time ordering
            limit: Maximum number of replies to return

        Returns:
            List of reply comments
        """
        pass

    @abstractmethod
    async def count_children(self, comment_id: CommentId) -> int:
        """Count direct replies to a comment, published or not.

        Args:
            comment_id: The parent comment ID

        Returns:
            Number of direct children
        """
        pass

    @abstractmethod
    async def create(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Insert a new comment.

        Args:
            post_id: Post the comment belongs to
            author_id: Author user ID
            content: Validated, trimmed content
            parent_id: Parent comment for replies (None for top-level)

        Returns:
            The stored comment with its assigned ID and timestamps
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content and refresh updated_at.

        Args:
            comment_id: ID of the comment to update
            content: New validated content

        Returns:
            Updated comment, or None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Hard delete a comment.

        Replies, reactions and media below it are removed by cascade.

        Args:
            comment_id: The comment ID to delete
        """
        pass
