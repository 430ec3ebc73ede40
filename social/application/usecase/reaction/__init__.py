"""Reaction use cases."""

from .get_comment_reactions import (
    GetCommentReactionsRequest,
    GetCommentReactionsResponse,
    GetCommentReactionsUseCase,
)
from .list_emojis import EmojiItem, ListEmojisResponse, ListEmojisUseCase
from .toggle_comment_reaction import (
    ReactionItem,
    ToggleCommentReactionRequest,
    ToggleCommentReactionResponse,
    ToggleCommentReactionUseCase,
)

__all__ = [
    "EmojiItem",
    "GetCommentReactionsRequest",
    "GetCommentReactionsResponse",
    "GetCommentReactionsUseCase",
    "ListEmojisResponse",
    "ListEmojisUseCase",
    "ReactionItem",
    "ToggleCommentReactionRequest",
    "ToggleCommentReactionResponse",
    "ToggleCommentReactionUseCase",
]
