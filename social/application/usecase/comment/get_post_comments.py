"""Get post comments use case."""

from math import ceil

from pydantic import BaseModel

from social.config import CommentSettings
from social.domain.error import ValidationError
from social.domain.service import CommentService, PostService, build_comment_tree
from social.domain.value import CommentSort, PostId

from .presenter import CommentItem, CommentPresenter, check_limit, parse_sort


class GetPostCommentsRequest(BaseModel):
    """Get post comments request."""

    post_id: int
    page: int = 1
    limit: int | None = None  # Falls back to the configured default
    sort: str = CommentSort.OLDEST.value


class PaginationInfo(BaseModel):
    """Pagination metadata, derived from top-level comments only."""

    current_page: int
    total_pages: int
    total_count: int
    limit: int
    has_next_page: bool
    has_prev_page: bool


class GetPostCommentsResponse(BaseModel):
    """Get post comments response."""

    post_id: int
    comments: list[CommentItem]
    total_count: int
    sort: CommentSort
    pagination: PaginationInfo


class GetPostCommentsUseCase:
    """Use case for one page of a post's comment threads.

    Only root comments are paginated. Every root on the page comes back with
    its complete published reply subtree, so a busy thread never spills onto
    the next page.
    """

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        presenter: CommentPresenter,
        settings: CommentSettings,
    ) -> None:
        """Initialize get post comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            presenter: Hydrates comments for the response
            settings: Page size defaults and bounds
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.presenter = presenter
        self.settings = settings

    async def execute(self, request: GetPostCommentsRequest) -> GetPostCommentsResponse:
        """Execute get post comments flow.

        Steps:
        1. Validate page, limit and sort (before any storage access)
        2. Count and fetch one page of published root comments
        3. Fetch every published reply below those roots in one batch
        4. Assemble the forest and hydrate authors, media and reactions

        Raises:
            ValidationError: If page, limit or sort is invalid
            NotFoundError: If the post doesn't exist
        """
        if request.page < 1:
            raise ValidationError("Page must be a positive integer")
        limit = check_limit(
            request.limit if request.limit is not None else self.settings.default_page_limit,
            self.settings.max_page_limit,
        )
        sort = parse_sort(request.sort)

        post_id = PostId(request.post_id)
        await self.post_service.get_post(post_id)

        offset = (request.page - 1) * limit
        roots, total_count = await self.comment_service.get_top_level_page(
            post_id=post_id, sort=sort, limit=limit, offset=offset
        )
        replies = await self.comment_service.get_descendants(
            [root.id for root in roots], sort
        )

        working_set = [*roots, *replies]
        forest = build_comment_tree(working_set, sort)
        comments = await self.presenter.present_tree(forest, working_set)

        total_pages = ceil(total_count / limit)
        return GetPostCommentsResponse(
            post_id=post_id,
            comments=comments,
            total_count=total_count,
            sort=sort,
            pagination=PaginationInfo(
                current_page=request.page,
                total_pages=total_pages,
                total_count=total_count,
                limit=limit,
                has_next_page=request.page < total_pages,
                has_prev_page=request.page > 1,
            ),
        )
