"""Create comment use case."""

from pydantic import BaseModel

from social.domain.service import CommentService, PostService
from social.domain.value import CommentId, PostId, UserId

from .presenter import CommentItem, CommentPresenter


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: int
    author_id: int  # User ID from authenticated user
    content: str
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem
    message: str


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        presenter: CommentPresenter,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            presenter: Builds the hydrated response item
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.presenter = presenter

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate content (before touching storage)
        2. Verify the post exists and is published
        3. Create the comment (service validates parent and depth)
        4. Re-read and hydrate the stored comment

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If the post or parent comment doesn't exist
            InvalidParentError: If the parent belongs to another post
            MaxDepthExceededError: If the reply would nest too deep
        """
        content = CommentService.validate_content(request.content)

        post_id = PostId(request.post_id)
        await self.post_service.get_post(post_id)

        parent_id = (
            CommentId(request.parent_id) if request.parent_id is not None else None
        )
        created = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=UserId(request.author_id),
            content=content,
            parent_id=parent_id,
        )

        stored = await self.comment_service.get_comment(created.id)
        item = await self.presenter.present_one(stored)

        message = (
            "Reply created successfully"
            if parent_id is not None
            else "Comment created successfully"
        )
        return CreateCommentResponse(comment=item, message=message)
