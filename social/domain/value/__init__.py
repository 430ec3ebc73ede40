"""Domain value objects."""

from social.domain.value.identifiers import (
    CommentId,
    MediaId,
    PostId,
    ReactionId,
    UserId,
)
from social.domain.value.types import (
    COMMON_EMOJIS,
    CommentSort,
    EmojiName,
    EmojiUnicode,
    ReactionAction,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "ReactionId",
    "MediaId",
    # Types
    "CommentSort",
    "ReactionAction",
    "EmojiName",
    "EmojiUnicode",
    "COMMON_EMOJIS",
]
