"""Get comment reactions use case."""

from pydantic import BaseModel

from social.domain.service import CommentService, ReactionService
from social.domain.value import CommentId

from social.application.usecase.comment.presenter import ReactionCountItem


class GetCommentReactionsRequest(BaseModel):
    """Get comment reactions request."""

    comment_id: int


class GetCommentReactionsResponse(BaseModel):
    """Get comment reactions response."""

    comment_id: int
    reaction_counts: list[ReactionCountItem]
    total_reactions: int


class GetCommentReactionsUseCase:
    """Use case for the reaction tallies of one comment."""

    def __init__(
        self, comment_service: CommentService, reaction_service: ReactionService
    ) -> None:
        self.comment_service = comment_service
        self.reaction_service = reaction_service

    async def execute(
        self, request: GetCommentReactionsRequest
    ) -> GetCommentReactionsResponse:
        """Execute get reactions flow.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        counts = await self.reaction_service.get_counts_for_comment(comment.id)
        return GetCommentReactionsResponse(
            comment_id=comment.id,
            reaction_counts=[ReactionCountItem.from_domain(c) for c in counts],
            total_reactions=sum(c.count for c in counts),
        )
