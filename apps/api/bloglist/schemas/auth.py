"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field


class AuthenticatedUser(BaseModel):
    """Resolved identity handed explicitly to services performing mutations."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(min_length=1)
    username: str = Field(min_length=1)


class TokenClaims(BaseModel):
    """Decoded payload of a verified access token."""

    id: str = Field(min_length=1)
    username: str | None = None
    iat: int | None = None
    exp: int | None = None


class LoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    token: str
    username: str
    name: str | None = None
