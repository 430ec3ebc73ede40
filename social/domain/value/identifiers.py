"""Strongly typed identifiers for domain entities.

All entities use database-assigned integer keys. NewType keeps a comment ID
from being passed where a post ID is expected.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
ReactionId = NewType("ReactionId", int)
MediaId = NewType("MediaId", int)
