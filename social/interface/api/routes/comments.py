"""Comment routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Path, Query, status
from pydantic import BaseModel, PositiveInt

from social.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    GetPostCommentsRequest,
    GetPostCommentsResponse,
    GetPostCommentsUseCase,
    GetRepliesRequest,
    GetRepliesResponse,
    GetRepliesUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from social.domain.service import JWTService
from social.interface.api.auth import require_user_id
from social.interface.api.schemas import ApiResponse

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)

CommentIdPath = Annotated[int, Path(gt=0)]
PostIdPath = Annotated[int, Path(gt=0)]


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    post_id: PositiveInt
    content: str  # Trimmed and length-checked by the domain
    parent_id: PositiveInt | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str


class DeletedCommentData(BaseModel):
    """Payload returned after a delete."""

    comment_id: int
    deleted_replies: int


@router.get(
    "/post/{post_id}", response_model=ApiResponse[GetPostCommentsResponse]
)
async def get_post_comments(
    post_id: PostIdPath,
    use_case: FromDishka[GetPostCommentsUseCase],
    sort: str = Query(default="oldest"),
    limit: int | None = Query(default=None),
    page: int = Query(default=1),
) -> ApiResponse[GetPostCommentsResponse]:
    """Get one page of a post's comment threads.

    Root comments are paginated; each comes with its complete reply tree.
    """
    result = await use_case.execute(
        GetPostCommentsRequest(post_id=post_id, page=page, limit=limit, sort=sort)
    )
    return ApiResponse(data=result)


@router.get("/{comment_id}", response_model=ApiResponse[CommentItem])
async def get_comment(
    comment_id: CommentIdPath,
    use_case: FromDishka[GetCommentUseCase],
) -> ApiResponse[CommentItem]:
    """Get a comment with its reactions and full reply tree."""
    result = await use_case.execute(GetCommentRequest(comment_id=comment_id))
    return ApiResponse(data=result.comment)


@router.post(
    "",
    response_model=ApiResponse[CommentItem],
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[CommentItem]:
    """Create a comment on a post or reply to another comment.

    Requires authentication.
    """
    user_id = require_user_id(
        jwt_service, auth_token, authorization, "create comments"
    )
    result = await use_case.execute(
        CreateCommentRequest(
            post_id=request.post_id,
            author_id=user_id,
            content=request.content,
            parent_id=request.parent_id,
        )
    )
    return ApiResponse(data=result.comment, message=result.message)


@router.put("/{comment_id}", response_model=ApiResponse[CommentItem])
async def update_comment(
    comment_id: CommentIdPath,
    request: UpdateCommentAPIRequest,
    use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[CommentItem]:
    """Update a comment's content. Only the author can edit."""
    user_id = require_user_id(jwt_service, auth_token, authorization, "edit comments")
    result = await use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, user_id=user_id, content=request.content
        )
    )
    return ApiResponse(data=result.comment, message=result.message)


@router.delete("/{comment_id}", response_model=ApiResponse[DeletedCommentData])
async def delete_comment(
    comment_id: CommentIdPath,
    use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[DeletedCommentData]:
    """Delete a comment and every reply below it. Only the author can delete."""
    user_id = require_user_id(
        jwt_service, auth_token, authorization, "delete comments"
    )
    result = await use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
    )
    return ApiResponse(
        data=DeletedCommentData(
            comment_id=result.comment_id, deleted_replies=result.deleted_replies
        ),
        message=result.message,
    )


@router.get("/{comment_id}/replies", response_model=ApiResponse[GetRepliesResponse])
async def get_replies(
    comment_id: CommentIdPath,
    use_case: FromDishka[GetRepliesUseCase],
    sort: str = Query(default="oldest"),
    limit: int | None = Query(default=None),
) -> ApiResponse[GetRepliesResponse]:
    """Get the direct replies to a comment as a flat list."""
    result = await use_case.execute(
        GetRepliesRequest(comment_id=comment_id, sort=sort, limit=limit)
    )
    return ApiResponse(data=result)
