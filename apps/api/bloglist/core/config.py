"""Application configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Auth configuration loaded from environment variables."""

    secret: str = Field(min_length=1)
    token_algorithm: str = "HS256"
    # None keeps tokens valid until the secret changes.
    token_ttl_seconds: int | None = Field(default=None, gt=0)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    model_config = SettingsConfigDict(env_prefix="BLOGLIST_", extra="ignore")


class ServerSettings(BaseSettings):
    """Transport configuration read once when the application is built."""

    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="BLOGLIST_", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


@lru_cache(maxsize=1)
def get_server_settings() -> ServerSettings:
    return ServerSettings()
