"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .media import InMemoryMediaRepository
from .post import InMemoryPostRepository
from .reaction import InMemoryReactionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryMediaRepository",
    "InMemoryPostRepository",
    "InMemoryReactionRepository",
    "InMemoryUserRepository",
]
