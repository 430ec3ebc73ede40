"""PostgreSQL repository implementations."""

from social.persistence.repository.comment import PostgresCommentRepository
from social.persistence.repository.media import PostgresMediaRepository
from social.persistence.repository.post import PostgresPostRepository
from social.persistence.repository.reaction import PostgresReactionRepository
from social.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresReactionRepository",
    "PostgresMediaRepository",
]
