"""User API schemas."""

from pydantic import BaseModel


class CreateUserRequest(BaseModel):
    # Presence and length are checked by the registration validator so the
    # error messages stay ordered; only the types are enforced here.
    username: str | None = None
    name: str | None = None
    password: str | None = None


class BlogSummary(BaseModel):
    id: str
    title: str
    author: str | None = None
    url: str


class User(BaseModel):
    id: str
    username: str
    name: str | None = None
    blogs: list[BlogSummary] = []
