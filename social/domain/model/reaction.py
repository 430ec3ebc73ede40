"""Reaction entity and derived tallies.

A reaction is one user's emoji on one comment. Tallies are never stored;
they are computed by grouping reactions by comment and emoji name.
"""

from datetime import datetime

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import (
    CommentId,
    EmojiName,
    EmojiUnicode,
    ReactionId,
    UserId,
)


class Reaction(DomainModel):
    """Reaction entity.

    Business rules:
    - A user holds at most one reaction per comment
    - Reacting again with the same emoji removes the reaction
    - Reacting with a different emoji replaces it
    """

    id: ReactionId
    user_id: UserId
    comment_id: CommentId
    emoji_name: EmojiName
    emoji_unicode: EmojiUnicode
    created_at: datetime = Field(default_factory=datetime.now)


class ReactionCount(DomainModel):
    """Per-emoji tally attached to a comment for display."""

    emoji_name: str
    count: int = Field(ge=0)
