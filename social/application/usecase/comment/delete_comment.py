"""Delete comment use case."""

from pydantic import BaseModel

from social.domain.error import NotAuthorizedError
from social.domain.service import CommentService
from social.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    user_id: int  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: int
    deleted_replies: int  # Direct replies only
    message: str


class DeleteCommentUseCase:
    """Use case for deleting a comment and everything below it."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        The reported reply count covers direct replies only; deeper replies
        are removed as well.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user doesn't own the comment
        """
        comment_id = CommentId(request.comment_id)

        comment = await self.comment_service.get_comment(comment_id)
        if comment.author_id != UserId(request.user_id):
            raise NotAuthorizedError("comment", request.comment_id, request.user_id)

        reply_count = await self.comment_service.delete_comment(comment_id)

        message = "Comment deleted successfully"
        if reply_count > 0:
            message += f" along with {reply_count} replies"

        return DeleteCommentResponse(
            comment_id=comment_id,
            deleted_replies=reply_count,
            message=message,
        )
