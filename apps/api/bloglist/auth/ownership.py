"""Per-resource ownership enforcement for blog mutations."""

from __future__ import annotations

import logging

from bloglist.core.logging_safety import safe_log_identifier
from bloglist.errors import AuthorizationError, NotFoundError
from bloglist.repositories.memory import BlogRecord, InMemoryStore
from bloglist.schemas.auth import AuthenticatedUser

logger = logging.getLogger(__name__)


class OwnershipEnforcer:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def authorize_mutation(self, identity: AuthenticatedUser, blog_id: str) -> BlogRecord:
        """Return the blog if ``identity`` owns it.

        Raises ``MalformedIdentifierError`` for an unparseable id,
        ``NotFoundError`` for an unknown blog and ``AuthorizationError`` when
        the blog belongs to someone else. Nothing is mutated here.
        """
        blog = self._store.get_blog(blog_id)
        if blog is None:
            raise NotFoundError("blog not found")

        if blog.user_id != identity.user_id:
            logger.warning(
                "ownership.rejected blog_id=%s user_id=%s owner_id=%s",
                safe_log_identifier(blog.id, prefix="bid"),
                safe_log_identifier(identity.user_id, prefix="uid"),
                safe_log_identifier(blog.user_id, prefix="uid"),
            )
            raise AuthorizationError("insufficient permission to modify blog")

        return blog


__all__ = ["OwnershipEnforcer"]
