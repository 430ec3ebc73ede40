"""Response models shared by the comment use cases.

Comments are hydrated in batches: one author lookup, one media lookup and one
grouped reaction tally per response, however many comments it carries.
"""

from datetime import datetime
from typing import Sequence

from pydantic import BaseModel

from social.domain.error import ValidationError
from social.domain.model import Comment, Media, ReactionCount, User
from social.domain.service import (
    CommentTreeNode,
    MediaService,
    ReactionService,
    UserService,
)
from social.domain.value import CommentId, CommentSort


class CommentAuthorItem(BaseModel):
    """Author attributes shown next to a comment."""

    id: int
    username: str
    first_name: str | None
    last_name: str | None
    avatar_url: str | None

    @classmethod
    def from_domain(cls, user: User) -> "CommentAuthorItem":
        return cls(
            id=user.id,
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            avatar_url=user.avatar_url,
        )


class CommentMediaItem(BaseModel):
    """Attachment summary."""

    id: int
    filename: str
    mime_type: str
    file_size: int

    @classmethod
    def from_domain(cls, media: Media) -> "CommentMediaItem":
        return cls(
            id=media.id,
            filename=media.filename,
            mime_type=media.mime_type,
            file_size=media.file_size,
        )


class ReactionCountItem(BaseModel):
    """Per-emoji tally."""

    emoji_name: str
    count: int

    @classmethod
    def from_domain(cls, count: ReactionCount) -> "ReactionCountItem":
        return cls(emoji_name=count.emoji_name, count=count.count)


class CommentItem(BaseModel):
    """Comment in a response, optionally with nested replies."""

    id: int
    post_id: int
    author_id: int
    parent_id: int | None
    content: str
    preview: str
    is_reply: bool
    is_edited: bool
    word_count: int
    created_at: datetime
    updated_at: datetime
    author: CommentAuthorItem | None = None
    media: CommentMediaItem | None = None
    reaction_counts: list[ReactionCountItem] = []
    replies: list["CommentItem"] = []


def parse_sort(value: str | CommentSort) -> CommentSort:
    """Parse a client sort parameter.

    Raises:
        ValidationError: If the value is not 'newest' or 'oldest'
    """
    try:
        return CommentSort(value)
    except ValueError:
        raise ValidationError("Sort must be either 'newest' or 'oldest'")


def check_limit(limit: int, maximum: int) -> int:
    """Reject page sizes outside 1..maximum.

    Raises:
        ValidationError: If the limit is out of bounds
    """
    if limit < 1 or limit > maximum:
        raise ValidationError(f"Limit must be between 1 and {maximum}")
    return limit


class CommentPresenter:
    """Turns domain comments into response items."""

    def __init__(
        self,
        user_service: UserService,
        media_service: MediaService,
        reaction_service: ReactionService,
    ) -> None:
        self.user_service = user_service
        self.media_service = media_service
        self.reaction_service = reaction_service

    async def present(self, comments: Sequence[Comment]) -> dict[CommentId, CommentItem]:
        """Hydrate a flat set of comments, keyed by comment ID."""
        if not comments:
            return {}

        comment_ids = [comment.id for comment in comments]
        authors = await self.user_service.get_users([c.author_id for c in comments])
        media = await self.media_service.get_for_comments(comment_ids)
        counts = await self.reaction_service.get_counts_for_comments(comment_ids)

        items: dict[CommentId, CommentItem] = {}
        for comment in comments:
            author = authors.get(comment.author_id)
            attachment = media.get(comment.id)
            items[comment.id] = CommentItem(
                id=comment.id,
                post_id=comment.post_id,
                author_id=comment.author_id,
                parent_id=comment.parent_id,
                content=comment.content,
                preview=comment.preview(),
                is_reply=comment.is_reply,
                is_edited=comment.is_edited,
                word_count=comment.word_count,
                created_at=comment.created_at,
                updated_at=comment.updated_at,
                author=CommentAuthorItem.from_domain(author) if author else None,
                media=CommentMediaItem.from_domain(attachment) if attachment else None,
                reaction_counts=[
                    ReactionCountItem.from_domain(c) for c in counts.get(comment.id, [])
                ],
            )
        return items

    async def present_one(self, comment: Comment) -> CommentItem:
        items = await self.present([comment])
        return items[comment.id]

    async def present_tree(
        self, roots: list[CommentTreeNode], comments: Sequence[Comment]
    ) -> list[CommentItem]:
        """Hydrate every comment once, then nest items along the tree.

        Args:
            roots: Forest produced by build_comment_tree
            comments: Every comment that appears in the forest
        """
        items = await self.present(comments)

        def to_item(node: CommentTreeNode) -> CommentItem:
            return items[node.comment.id].model_copy(
                update={"replies": [to_item(reply) for reply in node.replies]}
            )

        return [to_item(root) for root in roots]
