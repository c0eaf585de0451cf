"""Signed access token issuance and verification."""

from __future__ import annotations

import time
from typing import Any, Callable

from jose import JWTError, jwt
from pydantic import ValidationError as SchemaValidationError

from bloglist.schemas.auth import TokenClaims


class InvalidTokenError(Exception):
    """Raised when a token is absent, malformed, forged, expired, or lacks an identity."""


class TokenService:
    """Issues and verifies HS256 JWTs carrying ``{"id", "username"}``.

    The signing secret is configuration handed in at construction. Tokens only
    carry an ``exp`` claim when ``ttl_seconds`` is set.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        ttl_seconds: int | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret:
            raise ValueError("TokenService requires a non-empty secret")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    def issue(self, *, user_id: str, username: str) -> str:
        now = int(self._clock())
        claims: dict[str, Any] = {"id": user_id, "username": username, "iat": now}
        if self._ttl_seconds is not None:
            claims["exp"] = now + self._ttl_seconds
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str | None) -> TokenClaims:
        if not token:
            raise InvalidTokenError("token missing")

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as exc:
            raise InvalidTokenError(str(exc) or "invalid token") from exc

        try:
            return TokenClaims.model_validate(payload)
        except SchemaValidationError as exc:
            raise InvalidTokenError("token payload has no usable identity") from exc


__all__ = ["InvalidTokenError", "TokenService"]
