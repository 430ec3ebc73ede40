"""Update comment use case."""

from pydantic import BaseModel

from social.domain.error import NotAuthorizedError
from social.domain.service import CommentService
from social.domain.value import CommentId, UserId

from .presenter import CommentItem, CommentPresenter


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    user_id: int  # Current user ID (must be author)
    content: str  # New content (required, cannot be empty)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem
    message: str = "Comment updated successfully"


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(
        self, comment_service: CommentService, presenter: CommentPresenter
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
            presenter: Hydrates the updated comment
        """
        self.comment_service = comment_service
        self.presenter = presenter

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            ValidationError: If the new content is empty or too long
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user doesn't own the comment
        """
        content = CommentService.validate_content(request.content)
        comment_id = CommentId(request.comment_id)

        # 1. Retrieve existing comment
        comment = await self.comment_service.get_comment(comment_id)

        # 2. Check authorization (user owns comment)
        if comment.author_id != UserId(request.user_id):
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        # 3. Update via service
        updated = await self.comment_service.update_content(comment_id, content)

        item = await self.presenter.present_one(updated)
        return UpdateCommentResponse(comment=item)
