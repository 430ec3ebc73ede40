"""Domain model entities."""

from social.domain.model.comment import (
    MAX_COMMENT_DEPTH,
    MAX_CONTENT_LENGTH,
    Comment,
)
from social.domain.model.media import Media
from social.domain.model.post import Post
from social.domain.model.reaction import Reaction, ReactionCount
from social.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Reaction",
    "ReactionCount",
    "Media",
    "MAX_COMMENT_DEPTH",
    "MAX_CONTENT_LENGTH",
]
