"""User entity (display attributes only)."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import UserId


class User(DomainModel):
    """User as shown next to the comments they author."""

    id: UserId
    username: str = Field(min_length=1, max_length=50)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
