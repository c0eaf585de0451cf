"""Credential verification and token issuance."""

import logging

from bloglist.auth.passwords import PasswordHasher
from bloglist.auth.tokens import TokenService
from bloglist.core.logging_safety import safe_log_identifier
from bloglist.errors import AuthenticationError
from bloglist.repositories.memory import InMemoryStore
from bloglist.schemas.auth import LoginResponse

logger = logging.getLogger(__name__)


class LoginService:
    def __init__(self, store: InMemoryStore, hasher: PasswordHasher, token_service: TokenService) -> None:
        self._store = store
        self._hasher = hasher
        self._token_service = token_service

    def login(self, *, username: str | None, password: str | None) -> LoginResponse:
        safe_username = safe_log_identifier(username, prefix="usr")
        user = self._store.find_user_by_username(username) if username else None
        if user is None or not self._hasher.verify(password or "", user.password_hash):
            logger.warning("login.rejected username=%s", safe_username)
            raise AuthenticationError("invalid username or password")

        token = self._token_service.issue(user_id=user.id, username=user.username)
        logger.info("login.accepted user_id=%s", safe_log_identifier(user.id, prefix="uid"))
        return LoginResponse(token=token, username=user.username, name=user.name)
