"""In-memory record store used by the API and tests."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from bloglist.errors import MalformedIdentifierError

_IDENTIFIER_PATTERN = re.compile(r"^[0-9a-f]{32}$")


def parse_identifier(value: str) -> str:
    """Validate a store identifier, raising ``MalformedIdentifierError`` on anything else."""
    candidate = str(value or "").strip().lower()
    if not _IDENTIFIER_PATTERN.fullmatch(candidate):
        raise MalformedIdentifierError()
    return candidate


def _new_identifier() -> str:
    return uuid4().hex


@dataclass(slots=True)
class UserRecord:
    id: str
    username: str
    password_hash: str
    created_at: datetime
    name: str | None = None
    blog_ids: list[str] = field(default_factory=list)


@dataclass(slots=True)
class BlogRecord:
    id: str
    title: str
    url: str
    user_id: str
    created_at: datetime
    author: str | None = None
    likes: int = 0
    comments: list[str] = field(default_factory=list)
    updated_at: datetime | None = None


@dataclass(slots=True)
class InMemoryStore:
    """Simple, deterministic persistence layer keyed by opaque hex ids."""

    users: dict[str, UserRecord] = field(default_factory=dict)
    blogs: dict[str, BlogRecord] = field(default_factory=dict)
    user_write_count: int = 0
    blog_write_count: int = 0

    # Users

    def create_user(self, *, username: str, password_hash: str, name: str | None = None) -> UserRecord:
        user = UserRecord(
            id=_new_identifier(),
            username=username,
            name=name,
            password_hash=password_hash,
            created_at=datetime.now(UTC),
        )
        self.users[user.id] = user
        self.user_write_count += 1
        return user

    def get_user(self, user_id: str) -> UserRecord | None:
        return self.users.get(parse_identifier(user_id))

    def find_user_by_username(self, username: str) -> UserRecord | None:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def list_users(self) -> list[UserRecord]:
        users = list(self.users.values())
        users.sort(key=lambda record: record.created_at)
        return users

    # Blogs

    def create_blog(
        self,
        *,
        user_id: str,
        title: str,
        url: str,
        author: str | None = None,
        likes: int = 0,
    ) -> BlogRecord:
        owner = self.get_user(user_id)
        if owner is None:
            raise LookupError(f"blog owner {user_id!r} does not exist")

        blog = BlogRecord(
            id=_new_identifier(),
            title=title,
            url=url,
            author=author,
            likes=likes,
            user_id=owner.id,
            created_at=datetime.now(UTC),
        )
        self.blogs[blog.id] = blog
        owner.blog_ids.append(blog.id)
        self.blog_write_count += 1
        self.user_write_count += 1
        return blog

    def get_blog(self, blog_id: str) -> BlogRecord | None:
        return self.blogs.get(parse_identifier(blog_id))

    def list_blogs(self) -> list[BlogRecord]:
        blogs = list(self.blogs.values())
        blogs.sort(key=lambda record: record.created_at)
        return blogs

    def list_blogs_for_user(self, user_id: str) -> list[BlogRecord]:
        user = self.get_user(user_id)
        if user is None:
            return []
        return [self.blogs[blog_id] for blog_id in user.blog_ids if blog_id in self.blogs]

    def replace_blog(
        self,
        blog: BlogRecord,
        *,
        title: str,
        url: str,
        author: str | None,
        likes: int,
    ) -> BlogRecord:
        """Overwrite every mutable field; the owner and comments are kept."""
        blog.title = title
        blog.url = url
        blog.author = author
        blog.likes = likes
        blog.updated_at = datetime.now(UTC)
        self.blog_write_count += 1
        return blog

    def append_comment(self, blog: BlogRecord, comment: str) -> BlogRecord:
        blog.comments.append(comment)
        blog.updated_at = datetime.now(UTC)
        self.blog_write_count += 1
        return blog

    def delete_blog(self, blog: BlogRecord) -> None:
        self.blogs.pop(blog.id, None)
        self.blog_write_count += 1

        owner = self.users.get(blog.user_id)
        if owner is not None and blog.id in owner.blog_ids:
            owner.blog_ids.remove(blog.id)
            self.user_write_count += 1
