"""Domain layer DI providers."""

from dishka import Scope, provide_all

from social.domain.service import (
    CommentService,
    JWTService,
    MediaService,
    PostService,
    ReactionService,
    UserService,
)
from social.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, REQUEST-scoped like the repositories they wrap.

    Each request gets fresh services bound to its own transaction.
    """

    services = provide_all(
        CommentService,
        PostService,
        UserService,
        MediaService,
        ReactionService,
        JWTService,
        scope=Scope.REQUEST,
    )
