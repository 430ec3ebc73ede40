"""Comment domain service."""

from typing import Sequence

import logfire

from social.domain.error import (
    InvalidParentError,
    MaxDepthExceededError,
    NotFoundError,
    ValidationError,
)
from social.domain.model.comment import MAX_COMMENT_DEPTH, MAX_CONTENT_LENGTH, Comment
from social.domain.repository import CommentRepository
from social.domain.value import CommentId, CommentSort, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    @staticmethod
    def validate_content(content: str) -> str:
        """Trim and validate comment content.

        Args:
            content: Raw content from the client

        Returns:
            Trimmed content

        Raises:
            ValidationError: If empty after trimming or too long
        """
        trimmed = content.strip()
        if not trimmed:
            raise ValidationError("Comment content cannot be empty")
        if len(trimmed) > MAX_CONTENT_LENGTH:
            raise ValidationError(
                f"Comment content must be between 1 and {MAX_CONTENT_LENGTH} characters"
            )
        return trimmed

    async def get_depth(self, comment_id: CommentId) -> int:
        """Get the number of parent hops from a comment to its root.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.get_comment(comment_id)
        return await self._walk_depth(comment)

    async def _walk_depth(self, comment: Comment) -> int:
        # Bounded by the depth ceiling, so a corrupt chain can't loop forever
        depth = 0
        current = comment
        while current.parent_id is not None and depth < MAX_COMMENT_DEPTH:
            parent = await self.comment_repository.find_by_id(current.parent_id)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    async def validate_parent(
        self, post_id: PostId, parent_id: CommentId | None
    ) -> int:
        """Check that a new comment may be inserted under the given parent.

        Args:
            post_id: Post the new comment belongs to
            parent_id: Parent comment ID (None for top-level)

        Returns:
            Depth the new comment will have

        Raises:
            NotFoundError: If the parent doesn't exist
            InvalidParentError: If the parent belongs to another post
            MaxDepthExceededError: If the parent is already at the depth ceiling
        """
        if parent_id is None:
            return 0

        with logfire.span(
            "comment_service.validate_parent",
            post_id=post_id,
            parent_id=parent_id,
        ):
            parent = await self.comment_repository.find_by_id(parent_id)
            if parent is None:
                logfire.warn(
                    "Parent comment not found", parent_id=parent_id, post_id=post_id
                )
                raise NotFoundError("Parent comment", parent_id)

            if parent.post_id != post_id:
                logfire.warn(
                    "Parent comment does not belong to post",
                    parent_id=parent_id,
                    parent_post_id=parent.post_id,
                    target_post_id=post_id,
                )
                raise InvalidParentError(parent_id, post_id)

            parent_depth = await self._walk_depth(parent)
            if parent_depth >= MAX_COMMENT_DEPTH:
                logfire.warn(
                    "Maximum comment depth exceeded",
                    parent_id=parent_id,
                    parent_depth=parent_depth,
                )
                raise MaxDepthExceededError(MAX_COMMENT_DEPTH)

            return parent_depth + 1

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        The parent checks and the insert are separate reads and writes; a
        parent deleted in between is caught by the foreign key.

        Args:
            post_id: Post ID (existence is checked by the caller)
            author_id: Author user ID
            content: Comment content
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is invalid
            NotFoundError: If the parent doesn't exist
            InvalidParentError: If the parent belongs to another post
            MaxDepthExceededError: If the reply would nest too deep
        """
        content = self.validate_content(content)

        with logfire.span(
            "comment_service.create_comment",
            post_id=post_id,
            author_id=author_id,
            parent_id=parent_id,
        ):
            depth = await self.validate_parent(post_id, parent_id)

            saved = await self.comment_repository.create(
                post_id=post_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
            )
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post_id=post_id,
                depth=depth,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)
            return comment

    async def get_top_level_page(
        self, post_id: PostId, sort: CommentSort, limit: int, offset: int
    ) -> tuple[list[Comment], int]:
        """Get one page of root comments and the total number of roots.

        Args:
            post_id: Post ID
            sort: Creation-time ordering
            limit: Page size
            offset: Number of roots to skip

        Returns:
            Tuple of (page of root comments, total published roots)
        """
        with logfire.span(
            "comment_service.get_top_level_page",
            post_id=post_id,
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            total = await self.comment_repository.count_top_level_by_post(post_id)
            roots = await self.comment_repository.find_top_level_by_post(
                post_id=post_id, sort=sort, limit=limit, offset=offset
            )
            logfire.info(
                "Top-level comments retrieved",
                post_id=post_id,
                count=len(roots),
                total=total,
            )
            return roots, total

    async def get_descendants(
        self, root_ids: Sequence[CommentId], sort: CommentSort = CommentSort.OLDEST
    ) -> list[Comment]:
        """Get all published replies below the given comments in one read."""
        if not root_ids:
            return []
        with logfire.span(
            "comment_service.get_descendants", root_count=len(root_ids)
        ):
            replies = await self.comment_repository.find_descendants(root_ids, sort)
            logfire.info("Reply subtrees retrieved", count=len(replies))
            return replies

    async def get_replies(
        self, parent_id: CommentId, sort: CommentSort, limit: int
    ) -> list[Comment]:
        """Get published direct replies to a comment."""
        with logfire.span(
            "comment_service.get_replies", parent_id=parent_id, limit=limit
        ):
            return await self.comment_repository.find_replies(
                parent_id=parent_id, sort=sort, limit=limit
            )

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment.

        Raises:
            ValidationError: If content is invalid
            NotFoundError: If the comment doesn't exist
        """
        content = self.validate_content(content)

        with logfire.span(
            "comment_service.update_content",
            comment_id=comment_id,
            content_length=len(content),
        ):
            updated = await self.comment_repository.update_content(comment_id, content)
            if updated is None:
                logfire.warn("Comment not found for update", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)

            logfire.info(
                "Comment content updated",
                comment_id=comment_id,
                post_id=updated.post_id,
            )
            return updated

    async def delete_comment(self, comment_id: CommentId) -> int:
        """Delete a comment together with its whole reply subtree.

        Only direct replies are counted for the caller's message, even though
        deeper replies are removed too.

        Args:
            comment_id: Comment ID

        Returns:
            Number of direct replies removed along with the comment

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found for delete", comment_id=comment_id)
                raise NotFoundError("Comment", comment_id)

            reply_count = await self.comment_repository.count_children(comment_id)
            await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted",
                comment_id=comment_id,
                post_id=comment.post_id,
                direct_replies=reply_count,
            )
            return reply_count
