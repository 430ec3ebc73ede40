"""Reaction routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Path
from pydantic import BaseModel

from social.application.usecase.reaction import (
    GetCommentReactionsRequest,
    GetCommentReactionsResponse,
    GetCommentReactionsUseCase,
    ListEmojisResponse,
    ListEmojisUseCase,
    ToggleCommentReactionRequest,
    ToggleCommentReactionResponse,
    ToggleCommentReactionUseCase,
)
from social.domain.service import JWTService
from social.interface.api.auth import require_user_id
from social.interface.api.schemas import ApiResponse

router = APIRouter(prefix="/api/reactions", tags=["reactions"], route_class=DishkaRoute)


class ToggleReactionAPIRequest(BaseModel):
    """API request for reacting to a comment."""

    emoji_name: str
    emoji_unicode: str | None = None


@router.get("/emoji-list", response_model=ApiResponse[ListEmojisResponse])
async def list_emojis(
    use_case: FromDishka[ListEmojisUseCase],
) -> ApiResponse[ListEmojisResponse]:
    """List emoji names that may be sent without a unicode rendering."""
    return ApiResponse(data=await use_case.execute())


@router.post(
    "/comment/{comment_id}", response_model=ApiResponse[ToggleCommentReactionResponse]
)
async def toggle_comment_reaction(
    comment_id: Annotated[int, Path(gt=0)],
    request: ToggleReactionAPIRequest,
    use_case: FromDishka[ToggleCommentReactionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[ToggleCommentReactionResponse]:
    """Add, replace or remove the caller's reaction on a comment.

    Requires authentication.
    """
    user_id = require_user_id(
        jwt_service, auth_token, authorization, "react to comments"
    )
    result = await use_case.execute(
        ToggleCommentReactionRequest(
            comment_id=comment_id,
            user_id=user_id,
            emoji_name=request.emoji_name,
            emoji_unicode=request.emoji_unicode,
        )
    )
    return ApiResponse(data=result, message=result.message)


@router.get(
    "/comment/{comment_id}", response_model=ApiResponse[GetCommentReactionsResponse]
)
async def get_comment_reactions(
    comment_id: Annotated[int, Path(gt=0)],
    use_case: FromDishka[GetCommentReactionsUseCase],
) -> ApiResponse[GetCommentReactionsResponse]:
    """Get reaction tallies for a comment."""
    result = await use_case.execute(GetCommentReactionsRequest(comment_id=comment_id))
    return ApiResponse(data=result)
