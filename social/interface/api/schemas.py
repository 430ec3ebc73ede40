"""Response envelope shared by all API routes."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: ``{"success": true, "data": ..., "message": ...}``."""

    success: bool = True
    data: T
    message: str | None = None
