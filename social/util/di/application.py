"""Application layer DI providers."""

from dishka import Scope, provide, provide_all

from social.application.usecase.comment import (
    CommentPresenter,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    GetPostCommentsUseCase,
    GetRepliesUseCase,
    UpdateCommentUseCase,
)
from social.application.usecase.reaction import (
    GetCommentReactionsUseCase,
    ListEmojisUseCase,
    ToggleCommentReactionUseCase,
)
from social.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Use cases and the presenter they share.

    Constructors are fully annotated, so dishka builds each class from its
    ``__init__``. Everything lives per request because the domain services
    underneath hold the request's session.
    """

    presenter = provide(CommentPresenter, scope=Scope.REQUEST)

    comment_use_cases = provide_all(
        CreateCommentUseCase,
        GetPostCommentsUseCase,
        GetCommentUseCase,
        UpdateCommentUseCase,
        DeleteCommentUseCase,
        GetRepliesUseCase,
        scope=Scope.REQUEST,
    )

    reaction_use_cases = provide_all(
        ToggleCommentReactionUseCase,
        GetCommentReactionsUseCase,
        scope=Scope.REQUEST,
    )

    @provide(scope=Scope.APP)
    def list_emojis(self) -> ListEmojisUseCase:
        # Static catalogue, no request state
        return ListEmojisUseCase()
