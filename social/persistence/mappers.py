"""Row to entity mapping.

Repositories hand rows over as dicts (``row._asdict()``). Entities are frozen
pydantic models, so identifiers and emoji values are wrapped explicitly here.
"""

from typing import Any, Dict

from social.domain.model import Comment, Media, Post, Reaction, User
from social.domain.value import (
    CommentId,
    EmojiName,
    EmojiUnicode,
    MediaId,
    PostId,
    ReactionId,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
    )


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        author_id=UserId(row["author_id"]),
        content=row.get("content"),
        is_published=row["is_published"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        post_id=PostId(row["post_id"]),
        author_id=UserId(row["author_id"]),
        parent_id=CommentId(row["parent_id"])
        if row.get("parent_id") is not None
        else None,
        content=row["content"],
        is_published=row["is_published"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    """Convert database row to Reaction domain model.

    Args:
        row: Database row as dict

    Returns:
        Reaction domain model
    """
    return Reaction(
        id=ReactionId(row["id"]),
        user_id=UserId(row["user_id"]),
        comment_id=CommentId(row["comment_id"]),
        emoji_name=EmojiName(row["emoji_name"]),
        emoji_unicode=EmojiUnicode(row["emoji_unicode"]),
        created_at=row["created_at"],
    )


def row_to_media(row: Dict[str, Any]) -> Media:
    """Convert database row to Media domain model."""
    return Media(
        id=MediaId(row["id"]),
        comment_id=CommentId(row["comment_id"]),
        filename=row["filename"],
        mime_type=row["mime_type"],
        file_size=row["file_size"],
    )
