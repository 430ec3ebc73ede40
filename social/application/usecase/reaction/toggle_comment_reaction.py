"""Toggle comment reaction use case."""

from datetime import datetime

from pydantic import BaseModel

from social.domain.model import Reaction
from social.domain.service import CommentService, ReactionService
from social.domain.value import CommentId, ReactionAction, UserId

from social.application.usecase.comment.presenter import ReactionCountItem


class ReactionItem(BaseModel):
    """Reaction in a response."""

    id: int
    user_id: int
    comment_id: int
    emoji_name: str
    emoji_unicode: str
    created_at: datetime

    @classmethod
    def from_domain(cls, reaction: Reaction) -> "ReactionItem":
        return cls(
            id=reaction.id,
            user_id=reaction.user_id,
            comment_id=reaction.comment_id,
            emoji_name=reaction.emoji_name.root,
            emoji_unicode=reaction.emoji_unicode.root,
            created_at=reaction.created_at,
        )


class ToggleCommentReactionRequest(BaseModel):
    """Toggle comment reaction request."""

    comment_id: int
    user_id: int  # User ID from authenticated user
    emoji_name: str
    emoji_unicode: str | None = None  # Optional for well-known emoji names


class ToggleCommentReactionResponse(BaseModel):
    """Toggle comment reaction response."""

    action: ReactionAction
    reaction: ReactionItem | None
    reaction_counts: list[ReactionCountItem]
    message: str


class ToggleCommentReactionUseCase:
    """Use case for adding, replacing or removing a reaction on a comment."""

    def __init__(
        self, comment_service: CommentService, reaction_service: ReactionService
    ) -> None:
        """Initialize toggle comment reaction use case.

        Args:
            comment_service: Comment domain service
            reaction_service: Reaction domain service
        """
        self.comment_service = comment_service
        self.reaction_service = reaction_service

    async def execute(
        self, request: ToggleCommentReactionRequest
    ) -> ToggleCommentReactionResponse:
        """Execute toggle reaction flow.

        Raises:
            ValidationError: If the emoji is malformed
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))

        action, reaction = await self.reaction_service.toggle_comment_reaction(
            user_id=UserId(request.user_id),
            comment_id=comment.id,
            emoji_name=request.emoji_name,
            emoji_unicode=request.emoji_unicode,
        )
        counts = await self.reaction_service.get_counts_for_comment(comment.id)

        return ToggleCommentReactionResponse(
            action=action,
            reaction=ReactionItem.from_domain(reaction) if reaction else None,
            reaction_counts=[ReactionCountItem.from_domain(c) for c in counts],
            message=f"Reaction {action.value} successfully",
        )
