"""Shared configuration for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity.

    Repositories hand out new instances (``model_copy``) instead of mutating
    the ones callers already hold.
    """

    model_config = ConfigDict(frozen=True)
