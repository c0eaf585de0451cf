"""Blog service layer."""

import logging

from bloglist.auth.ownership import OwnershipEnforcer
from bloglist.core.logging_safety import safe_log_identifier
from bloglist.domain.blog_stats import summarize
from bloglist.errors import NotFoundError, ValidationError
from bloglist.projections import to_blog
from bloglist.repositories.memory import InMemoryStore
from bloglist.schemas.auth import AuthenticatedUser
from bloglist.schemas.blog import Blog, BlogPayload, BlogStats

logger = logging.getLogger(__name__)


def _validated_fields(payload: BlogPayload) -> dict:
    if not payload.title or not payload.title.strip():
        raise ValidationError("title is required")
    if not payload.url or not payload.url.strip():
        raise ValidationError("url is required")

    likes = 0 if payload.likes is None else payload.likes
    if likes < 0:
        raise ValidationError("likes must be a non-negative integer")

    return {"title": payload.title, "url": payload.url, "author": payload.author, "likes": likes}


class BlogService:
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._ownership = OwnershipEnforcer(store)

    def list_blogs(self) -> list[Blog]:
        return [to_blog(record, self._store) for record in self._store.list_blogs()]

    def get_blog(self, *, blog_id: str) -> Blog:
        record = self._store.get_blog(blog_id)
        if record is None:
            raise NotFoundError("blog not found")
        return to_blog(record, self._store)

    def get_stats(self) -> BlogStats:
        return summarize(self._store.list_blogs())

    def create_blog(self, *, identity: AuthenticatedUser, payload: BlogPayload) -> Blog:
        fields = _validated_fields(payload)
        record = self._store.create_blog(user_id=identity.user_id, **fields)
        logger.info(
            "blog.created blog_id=%s user_id=%s",
            safe_log_identifier(record.id, prefix="bid"),
            safe_log_identifier(identity.user_id, prefix="uid"),
        )
        return to_blog(record, self._store)

    def replace_blog(self, *, identity: AuthenticatedUser, blog_id: str, payload: BlogPayload) -> Blog:
        # Last write wins; concurrent replacements are not serialized.
        record = self._ownership.authorize_mutation(identity, blog_id)
        fields = _validated_fields(payload)
        self._store.replace_blog(record, **fields)
        logger.info("blog.replaced blog_id=%s", safe_log_identifier(record.id, prefix="bid"))
        return to_blog(record, self._store)

    def add_comment(self, *, blog_id: str, comment: str | None) -> Blog:
        record = self._store.get_blog(blog_id)
        if record is None:
            raise NotFoundError("blog not found")
        if not comment or not comment.strip():
            raise ValidationError("comment is required")

        self._store.append_comment(record, comment)
        return to_blog(record, self._store)

    def delete_blog(self, *, identity: AuthenticatedUser, blog_id: str) -> None:
        record = self._ownership.authorize_mutation(identity, blog_id)
        self._store.delete_blog(record)
        logger.info(
            "blog.deleted blog_id=%s user_id=%s",
            safe_log_identifier(record.id, prefix="bid"),
            safe_log_identifier(identity.user_id, prefix="uid"),
        )
