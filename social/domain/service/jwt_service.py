"""Caller identity service."""

import logfire

from social.config import AuthSettings
from social.domain.value import UserId
from social.util.jwt import JWTError, decode_token

from .base import Service


class JWTService(Service):
    """Resolves the user behind a request token.

    Reads are anonymous, so a missing or bad token is not an error here;
    routes that need a user turn ``None`` into a 401.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Return the token's user ID, or None if it is absent or untrusted."""
        if not token:
            return None

        with logfire.span("jwt_service.get_user_id_from_token"):
            try:
                claims = decode_token(token, self.auth_settings)
            except JWTError as e:
                logfire.info("Rejected request token", reason=str(e))
                return None
            return UserId(claims.user_id)
