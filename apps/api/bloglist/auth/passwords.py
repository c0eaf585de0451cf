"""Salted one-way password hashing backed by bcrypt."""

import bcrypt

# bcrypt only looks at the first 72 bytes; newer releases reject longer input.
_BCRYPT_MAX_BYTES = 72
_ENCODING = "utf-8"


def _to_bytes(plaintext: str) -> bytes:
    return plaintext.encode(_ENCODING)[:_BCRYPT_MAX_BYTES]


class PasswordHasher:
    def __init__(self, rounds: int = 10) -> None:
        self._rounds = rounds

    def hash(self, plaintext: str) -> str:
        digest = bcrypt.hashpw(_to_bytes(plaintext), bcrypt.gensalt(rounds=self._rounds))
        return digest.decode(_ENCODING)

    def verify(self, plaintext: str, digest: str) -> bool:
        if not plaintext or not digest:
            return False
        try:
            return bcrypt.checkpw(_to_bytes(plaintext), digest.encode(_ENCODING))
        except ValueError:
            # Not a bcrypt digest.
            return False


__all__ = ["PasswordHasher"]
