"""User service layer."""

import logging

from bloglist.auth.passwords import PasswordHasher
from bloglist.auth.registration import validate_registration
from bloglist.core.logging_safety import safe_log_identifier
from bloglist.errors import NotFoundError
from bloglist.projections import to_user
from bloglist.repositories.memory import InMemoryStore
from bloglist.schemas.user import User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, store: InMemoryStore, hasher: PasswordHasher) -> None:
        self._store = store
        self._hasher = hasher

    def register(self, *, username: str | None, password: str | None, name: str | None = None) -> User:
        validate_registration(username, password, self._store)

        record = self._store.create_user(
            username=username,
            name=name,
            password_hash=self._hasher.hash(password),
        )
        logger.info("user.registered user_id=%s", safe_log_identifier(record.id, prefix="uid"))
        return to_user(record, self._store)

    def list_users(self) -> list[User]:
        return [to_user(record, self._store) for record in self._store.list_users()]

    def get_user(self, *, user_id: str) -> User:
        record = self._store.get_user(user_id)
        if record is None:
            raise NotFoundError("user not found")
        return to_user(record, self._store)
