"""Post entity.

Posts are owned by a collaborator service; the comment API only needs to
know whether a post exists and is visible.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import PostId, UserId


class Post(DomainModel):
    """Post that comments attach to."""

    id: PostId
    author_id: UserId
    content: Optional[str] = None
    is_published: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
