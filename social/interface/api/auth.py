"""Caller identity for API routes."""

from fastapi import HTTPException, status

from social.domain.service import JWTService
from social.domain.value import UserId


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_user_id(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
    action: str,
) -> UserId:
    """Resolve the calling user, preferring the cookie over the header.

    Raises:
        HTTPException: 401 if no valid token was presented
    """
    user_id = jwt_service.get_user_id_from_token(
        auth_token or bearer_token(authorization)
    )
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id
