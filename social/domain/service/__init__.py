"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .comment_tree import (
    CommentTreeNode,
    build_comment_tree,
    flatten_comment_tree,
    sort_comment_tree,
)
from .jwt_service import JWTService
from .media_service import MediaService
from .post_service import PostService
from .reaction_service import ReactionService
from .user_service import UserService

__all__ = [
    "CommentService",
    "CommentTreeNode",
    "JWTService",
    "MediaService",
    "PostService",
    "ReactionService",
    "Service",
    "UserService",
    "build_comment_tree",
    "flatten_comment_tree",
    "sort_comment_tree",
]
