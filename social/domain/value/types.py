"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalization.
"""

import re
from enum import Enum

from pydantic import field_validator

from social.domain.value.common import RootValueObject


class CommentSort(str, Enum):
    """Ordering of sibling comments by creation time."""

    NEWEST = "newest"  # created_at DESC
    OLDEST = "oldest"  # created_at ASC

    @property
    def descending(self) -> bool:
        return self is CommentSort.NEWEST


class ReactionAction(str, Enum):
    """Outcome of toggling a reaction."""

    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"


class EmojiName(RootValueObject[str]):
    """Human-readable emoji name, e.g. 'thumbs_up', 'heart', 'laugh'.

    Normalized to lowercase with spaces turned into underscores; anything
    outside ``[a-z0-9_]`` is dropped. Must be 1-50 characters afterwards.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        """Normalize raw input before length validation."""
        if isinstance(v, str):
            v = re.sub(r"\s+", "_", v.strip().lower())
            v = re.sub(r"[^a-z0-9_]", "", v)
        return v

    @field_validator("root")
    @classmethod
    def validate_length(cls, v: str) -> str:
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Emoji name must be 1-50 letters, digits or underscores")
        return v


class EmojiUnicode(RootValueObject[str]):
    """Unicode rendering of an emoji (1-20 characters)."""

    @field_validator("root", mode="before")
    @classmethod
    def strip(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator("root")
    @classmethod
    def validate_length(cls, v: str) -> str:
        if len(v) < 1 or len(v) > 20:
            raise ValueError("Emoji unicode must be 1-20 characters")
        return v


# Names clients may send without a unicode rendering
COMMON_EMOJIS: dict[str, str] = {
    "like": "\U0001f44d",
    "thumbs_up": "\U0001f44d",
    "love": "❤️",
    "heart": "❤️",
    "laugh": "\U0001f602",
    "haha": "\U0001f602",
    "wow": "\U0001f62e",
    "surprised": "\U0001f62e",
    "sad": "\U0001f622",
    "cry": "\U0001f622",
    "angry": "\U0001f620",
    "mad": "\U0001f620",
    "care": "\U0001f917",
    "hug": "\U0001f917",
    "fire": "\U0001f525",
    "clap": "\U0001f44f",
    "party": "\U0001f389",
    "celebrate": "\U0001f389",
    "thinking": "\U0001f914",
    "cool": "\U0001f60e",
}
