"""Comment entity.

Comments form reply trees under a post. A comment with no parent is a root
(top-level) comment; every other comment replies to a comment on the same
post. Depth is never stored: it is the number of parent hops to the root and
is computed on demand, which is safe because ``parent_id`` never changes once
a comment exists.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import CommentId, PostId, UserId

# A root comment has depth 0; no comment may sit deeper than this
MAX_COMMENT_DEPTH = 5

MAX_CONTENT_LENGTH = 2000

PREVIEW_LENGTH = 100


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through ``parent_id`` only. Deleting a comment
    deletes its entire subtree (storage cascade).
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    parent_id: Optional[CommentId] = None
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    is_published: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    @property
    def is_edited(self) -> bool:
        return self.updated_at > self.created_at

    @property
    def word_count(self) -> int:
        return len(self.content.split())

    def preview(self, max_length: int = PREVIEW_LENGTH) -> str:
        """Abbreviated content for listings."""
        if len(self.content) <= max_length:
            return self.content
        return self.content[:max_length].strip() + "..."
