"""Signed caller-identity tokens.

Tokens are issued by the login flow of the wider platform; this service only
decodes them. ``encode_token`` exists for tooling and tests that need a token
the API will accept.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from social.config import AuthSettings


class TokenClaims(BaseModel):
    """Claims this API reads from a token."""

    user_id: int
    iat: datetime | None = None
    exp: datetime


class JWTError(Exception):
    """Token could not be trusted (bad signature, expired or malformed)."""


def encode_token(
    user_id: int, settings: AuthSettings, expires_in: timedelta | None = None
) -> str:
    """Sign a token identifying ``user_id``.

    Args:
        user_id: User the token speaks for
        settings: Secret, algorithm and default lifetime
        expires_in: Lifetime override; defaults to ``jwt_expiry_days``
    """
    issued_at = datetime.now(timezone.utc)
    lifetime = expires_in or timedelta(days=settings.jwt_expiry_days)
    claims = {"user_id": user_id, "iat": issued_at, "exp": issued_at + lifetime}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: AuthSettings) -> TokenClaims:
    """Verify the signature and expiry of a token and return its claims.

    Raises:
        JWTError: If the token is expired, forged or lacks a usable user_id
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenClaims.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Token carries no valid user_id") from e
