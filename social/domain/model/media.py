"""Media attachment summary."""

from pydantic import Field

from social.domain.model.common import DomainModel
from social.domain.value import CommentId, MediaId


class Media(DomainModel):
    """File attached to a comment.

    Uploads and processing live elsewhere; comments only display this
    summary.
    """

    id: MediaId
    comment_id: CommentId
    filename: str
    mime_type: str
    file_size: int = Field(ge=0)
