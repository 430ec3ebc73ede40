"""Mock persistence providers for testing."""

from dishka import Scope, from_context, provide

from social.domain.repository import (
    CommentRepository,
    MediaRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
)
from social.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryMediaRepository,
    InMemoryPostRepository,
    InMemoryReactionRepository,
    InMemoryUserRepository,
)
from social.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are REQUEST-scoped but share one InMemoryDatabase, passed in
    as container context. Each test builds its own container and database, so
    tests stay isolated while requests within a test see each other's writes.
    """

    __is_mock__ = True

    database = from_context(provides=InMemoryDatabase, scope=Scope.APP)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, database: InMemoryDatabase) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, database: InMemoryDatabase) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, database: InMemoryDatabase) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(
        self, database: InMemoryDatabase
    ) -> ReactionRepository:
        """Provide in-memory reaction repository."""
        return InMemoryReactionRepository(database)

    @provide(scope=Scope.REQUEST)
    def get_media_repository(self, database: InMemoryDatabase) -> MediaRepository:
        """Provide in-memory media repository."""
        return InMemoryMediaRepository(database)
