"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from social.domain.repository.comment import CommentRepository
from social.domain.repository.media import MediaRepository
from social.domain.repository.post import PostRepository
from social.domain.repository.reaction import ReactionRepository
from social.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "ReactionRepository",
    "MediaRepository",
]
