"""Dependency wiring for routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Header, Request

from bloglist.auth.extraction import extract_bearer_token
from bloglist.auth.identity import IdentityResolver
from bloglist.auth.passwords import PasswordHasher
from bloglist.auth.tokens import TokenService
from bloglist.core.config import Settings, get_settings
from bloglist.repositories.memory import InMemoryStore
from bloglist.schemas.auth import AuthenticatedUser
from bloglist.services.blogs import BlogService
from bloglist.services.login import LoginService
from bloglist.services.users import UserService


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def get_password_hasher(settings: Annotated[Settings, Depends(get_settings)]) -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


def get_token_service(settings: Annotated[Settings, Depends(get_settings)]) -> TokenService:
    return TokenService(
        settings.secret,
        algorithm=settings.token_algorithm,
        ttl_seconds=settings.token_ttl_seconds,
    )


def get_bearer_token(authorization: Annotated[str | None, Header()] = None) -> str | None:
    return extract_bearer_token(authorization)


def get_identity_resolver(
    token_service: Annotated[TokenService, Depends(get_token_service)],
    store: Annotated[InMemoryStore, Depends(get_store)],
) -> IdentityResolver:
    return IdentityResolver(token_service, store)


async def get_authenticated_user(
    token: Annotated[str | None, Depends(get_bearer_token)],
    resolver: Annotated[IdentityResolver, Depends(get_identity_resolver)],
) -> AuthenticatedUser:
    """Resolve the bearer token into the identity passed on to mutating handlers."""
    return resolver.resolve(token)


def get_login_service(
    store: Annotated[InMemoryStore, Depends(get_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> LoginService:
    return LoginService(store, hasher, token_service)


def get_user_service(
    store: Annotated[InMemoryStore, Depends(get_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> UserService:
    return UserService(store, hasher)


def get_blog_service(store: Annotated[InMemoryStore, Depends(get_store)]) -> BlogService:
    return BlogService(store)
