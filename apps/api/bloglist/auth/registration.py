"""Registration input validation."""

from bloglist.errors import ValidationError
from bloglist.repositories.memory import InMemoryStore

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3


def validate_registration(username: str | None, password: str | None, store: InMemoryStore) -> None:
    """Raise ``ValidationError`` for the first failing rule.

    Presence is checked before length, and the username before the password,
    so several simultaneous violations always report the same message.
    """
    if not username or not password:
        raise ValidationError("username and password are required")

    if len(username) < MIN_USERNAME_LENGTH:
        raise ValidationError("username is too short")
    if store.find_user_by_username(username) is not None:
        raise ValidationError("username is already taken")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError("password is too short")


__all__ = ["MIN_PASSWORD_LENGTH", "MIN_USERNAME_LENGTH", "validate_registration"]
