"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .get_post_comments import (
    GetPostCommentsRequest,
    GetPostCommentsResponse,
    GetPostCommentsUseCase,
    PaginationInfo,
)
from .get_replies import GetRepliesRequest, GetRepliesResponse, GetRepliesUseCase
from .presenter import (
    CommentAuthorItem,
    CommentItem,
    CommentMediaItem,
    CommentPresenter,
    ReactionCountItem,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentAuthorItem",
    "CommentItem",
    "CommentMediaItem",
    "CommentPresenter",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "GetPostCommentsRequest",
    "GetPostCommentsResponse",
    "GetPostCommentsUseCase",
    "GetRepliesRequest",
    "GetRepliesResponse",
    "GetRepliesUseCase",
    "PaginationInfo",
    "ReactionCountItem",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
