"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from social.config import Settings
from social.domain.repository import (
    CommentRepository,
    MediaRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
)
from social.persistence.database import create_engine, create_session_factory
from social.persistence.repository import (
    PostgresCommentRepository,
    PostgresMediaRepository,
    PostgresPostRepository,
    PostgresReactionRepository,
    PostgresUserRepository,
)
from social.util.di.base import ProviderBase
from social.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base.

    Implementations must provide the five repository protocols at REQUEST
    scope, all sharing whatever unit of work backs a single request.
    """

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL persistence: one pooled engine, one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide the request's session.

        Every write made while handling a request commits together when the
        request finishes; any exception rolls all of them back, including a
        comment inserted before a later step of the same request failed.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn(
                    "Rolling back request transaction",
                    error_class=type(e).__name__,
                    error=str(e),
                )
                await session.rollback()
                raise

    # Repositories only need the session, so dishka builds them from __init__
    users = provide(PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST)
    posts = provide(PostgresPostRepository, provides=PostRepository, scope=Scope.REQUEST)
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    reactions = provide(
        PostgresReactionRepository, provides=ReactionRepository, scope=Scope.REQUEST
    )
    media = provide(PostgresMediaRepository, provides=MediaRepository, scope=Scope.REQUEST)
