"""Resolution of a bearer token into a live, authenticated user."""

from __future__ import annotations

import logging

from bloglist.auth.tokens import InvalidTokenError, TokenService
from bloglist.core.logging_safety import safe_log_identifier
from bloglist.errors import AuthenticationError, MalformedIdentifierError
from bloglist.repositories.memory import InMemoryStore
from bloglist.schemas.auth import AuthenticatedUser

logger = logging.getLogger(__name__)


class IdentityResolver:
    def __init__(self, token_service: TokenService, store: InMemoryStore) -> None:
        self._token_service = token_service
        self._store = store

    def resolve(self, token: str | None) -> AuthenticatedUser:
        """Return the token's user or raise ``AuthenticationError``.

        A token naming a user that no longer exists is treated exactly like an
        invalid token.
        """
        if not token:
            logger.warning("auth.rejected reason=missing_token")
            raise AuthenticationError()

        try:
            claims = self._token_service.verify(token)
        except InvalidTokenError as exc:
            logger.warning(
                "auth.rejected reason=token_verification_failed detail=%s",
                type(exc.__cause__ or exc).__name__,
            )
            raise AuthenticationError() from exc

        safe_user_id = safe_log_identifier(claims.id, prefix="uid")
        try:
            user = self._store.get_user(claims.id)
        except MalformedIdentifierError as exc:
            logger.warning("auth.rejected user_id=%s reason=malformed_user_id", safe_user_id)
            raise AuthenticationError() from exc

        if user is None:
            logger.warning("auth.rejected user_id=%s reason=unknown_user", safe_user_id)
            raise AuthenticationError()

        logger.info("auth.accepted user_id=%s", safe_user_id)
        return AuthenticatedUser(user_id=user.id, username=user.username)


__all__ = ["IdentityResolver"]
