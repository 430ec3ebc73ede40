"""Get replies use case."""

from pydantic import BaseModel

from social.config import CommentSettings
from social.domain.service import CommentService
from social.domain.value import CommentId, CommentSort

from .presenter import CommentItem, CommentPresenter, check_limit, parse_sort


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: int
    sort: str = CommentSort.OLDEST.value
    limit: int | None = None  # Falls back to the configured default


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    parent_comment_id: int
    replies: list[CommentItem]
    total_count: int
    sort: CommentSort


class GetRepliesUseCase:
    """Use case for the direct replies to a comment, as a flat list."""

    def __init__(
        self,
        comment_service: CommentService,
        presenter: CommentPresenter,
        settings: CommentSettings,
    ) -> None:
        self.comment_service = comment_service
        self.presenter = presenter
        self.settings = settings

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow.

        Raises:
            ValidationError: If limit or sort is invalid
            NotFoundError: If the parent comment doesn't exist
        """
        limit = check_limit(
            request.limit
            if request.limit is not None
            else self.settings.default_replies_limit,
            self.settings.max_replies_limit,
        )
        sort = parse_sort(request.sort)

        parent = await self.comment_service.get_comment(CommentId(request.comment_id))
        replies = await self.comment_service.get_replies(parent.id, sort, limit)

        items = await self.presenter.present(replies)
        return GetRepliesResponse(
            parent_comment_id=parent.id,
            replies=[items[reply.id] for reply in replies],
            total_count=len(replies),
            sort=sort,
        )
