"""Reaction domain service."""

from typing import Sequence

import logfire
from pydantic import ValidationError as PydanticValidationError

from social.domain.error import ConflictError, ValidationError
from social.domain.model import Reaction, ReactionCount
from social.domain.repository import ReactionRepository
from social.domain.value import (
    COMMON_EMOJIS,
    CommentId,
    EmojiName,
    EmojiUnicode,
    ReactionAction,
    UserId,
)

from .base import Service


class ReactionService(Service):
    """Domain service for comment reactions."""

    def __init__(self, reaction_repository: ReactionRepository) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
        """
        self.reaction_repository = reaction_repository

    @staticmethod
    def normalize_emoji(
        emoji_name: str, emoji_unicode: str | None = None
    ) -> tuple[EmojiName, EmojiUnicode]:
        """Normalize client emoji input.

        Well-known names (see COMMON_EMOJIS) may omit the unicode rendering.

        Raises:
            ValidationError: If the name or unicode is malformed, or a custom
                emoji arrives without unicode
        """
        try:
            name = EmojiName(emoji_name)
            if not emoji_unicode:
                known = COMMON_EMOJIS.get(name.root)
                if known is None:
                    raise ValidationError(
                        f"Emoji unicode is required for custom emoji '{name.root}'"
                    )
                emoji_unicode = known
            return name, EmojiUnicode(emoji_unicode)
        except PydanticValidationError as e:
            raise ValidationError(e.errors()[0]["msg"]) from e

    async def get_counts_for_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, list[ReactionCount]]:
        """Tally reactions for many comments with one grouped query.

        Args:
            comment_ids: Comments to tally

        Returns:
            Mapping of comment ID to tallies; comments without reactions are absent
        """
        if not comment_ids:
            return {}
        with logfire.span(
            "reaction_service.get_counts_for_comments", count=len(comment_ids)
        ):
            return await self.reaction_repository.count_by_comments(comment_ids)

    async def get_counts_for_comment(
        self, comment_id: CommentId
    ) -> list[ReactionCount]:
        """Tally reactions for a single comment."""
        counts = await self.get_counts_for_comments([comment_id])
        return counts.get(comment_id, [])

    async def toggle_comment_reaction(
        self,
        user_id: UserId,
        comment_id: CommentId,
        emoji_name: str,
        emoji_unicode: str | None = None,
    ) -> tuple[ReactionAction, Reaction | None]:
        """Add, remove or replace a user's reaction on a comment.

        - No existing reaction: add one
        - Existing reaction with the same emoji: remove it
        - Existing reaction with another emoji: replace the emoji

        Args:
            user_id: Reacting user
            comment_id: Comment (existence is checked by the caller)
            emoji_name: Emoji name, normalized here
            emoji_unicode: Emoji rendering (optional for well-known names)

        Returns:
            Tuple of (action taken, resulting reaction or None if removed)
        """
        name, unicode = self.normalize_emoji(emoji_name, emoji_unicode)

        with logfire.span(
            "reaction_service.toggle_comment_reaction",
            user_id=user_id,
            comment_id=comment_id,
            emoji_name=name.root,
        ):
            existing = await self.reaction_repository.find_by_user_and_comment(
                user_id, comment_id
            )

            if existing is None:
                reaction = await self.reaction_repository.create(
                    user_id=user_id,
                    comment_id=comment_id,
                    emoji_name=name,
                    emoji_unicode=unicode,
                )
                if reaction is not None:
                    logfire.info("Reaction added", reaction_id=reaction.id)
                    return ReactionAction.ADDED, reaction

                # A concurrent toggle by the same user inserted first; toggle
                # against the row it left behind
                logfire.info("Concurrent reaction insert", user_id=user_id)
                existing = await self.reaction_repository.find_by_user_and_comment(
                    user_id, comment_id
                )
                if existing is None:
                    raise ConflictError("Reaction changed concurrently, please retry")

            if existing.emoji_unicode == unicode:
                await self.reaction_repository.delete(existing.id)
                logfire.info("Reaction removed", reaction_id=existing.id)
                return ReactionAction.REMOVED, None

            updated = await self.reaction_repository.update_emoji(
                existing.id, name, unicode
            )
            logfire.info("Reaction updated", reaction_id=existing.id)
            return ReactionAction.UPDATED, updated
