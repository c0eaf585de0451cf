"""Mapping of stored records to their external JSON representation.

Internal fields (password hash, timestamps, raw owner id) never leave the
store through these functions.
"""

from __future__ import annotations

from bloglist.repositories.memory import BlogRecord, InMemoryStore, UserRecord
from bloglist.schemas.blog import Blog, OwnerSummary
from bloglist.schemas.user import BlogSummary, User


def to_owner_summary(user: UserRecord | None) -> OwnerSummary | None:
    if user is None:
        return None
    return OwnerSummary(id=user.id, username=user.username, name=user.name)


def to_blog(record: BlogRecord, store: InMemoryStore) -> Blog:
    return Blog(
        id=record.id,
        title=record.title,
        author=record.author,
        url=record.url,
        likes=record.likes,
        user=to_owner_summary(store.users.get(record.user_id)),
        comments=list(record.comments),
    )


def to_user(record: UserRecord, store: InMemoryStore) -> User:
    return User(
        id=record.id,
        username=record.username,
        name=record.name,
        blogs=[
            BlogSummary(id=blog.id, title=blog.title, author=blog.author, url=blog.url)
            for blog in store.list_blogs_for_user(record.id)
        ],
    )
