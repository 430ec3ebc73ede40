"""Get single comment use case."""

from pydantic import BaseModel

from social.domain.service import CommentService, build_comment_tree
from social.domain.value import CommentId, CommentSort

from .presenter import CommentItem, CommentPresenter


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: int


class GetCommentResponse(BaseModel):
    """Get comment response."""

    comment: CommentItem


class GetCommentUseCase:
    """Use case for a comment together with its full reply subtree."""

    def __init__(
        self, comment_service: CommentService, presenter: CommentPresenter
    ) -> None:
        self.comment_service = comment_service
        self.presenter = presenter

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Replies are ordered oldest first at every level.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        replies = await self.comment_service.get_descendants(
            [comment.id], CommentSort.OLDEST
        )

        working_set = [comment, *replies]
        forest = build_comment_tree(working_set, CommentSort.OLDEST)
        items = await self.presenter.present_tree(forest, working_set)
        return GetCommentResponse(comment=items[0])
