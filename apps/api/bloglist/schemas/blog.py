"""Blog API schemas."""

from pydantic import BaseModel, StrictInt


class BlogPayload(BaseModel):
    """Body for both creation and full replacement of a blog."""

    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: StrictInt | None = None


class CommentRequest(BaseModel):
    comment: str | None = None


class OwnerSummary(BaseModel):
    id: str
    username: str
    name: str | None = None


class Blog(BaseModel):
    id: str
    title: str
    author: str | None = None
    url: str
    likes: int
    user: OwnerSummary | None = None
    comments: list[str] = []


class FavoriteBlog(BaseModel):
    title: str
    author: str | None = None
    likes: int


class AuthorBlogCount(BaseModel):
    author: str | None = None
    blogs: int


class AuthorLikeCount(BaseModel):
    author: str | None = None
    likes: int


class BlogStats(BaseModel):
    total_likes: int
    favorite_blog: FavoriteBlog | None = None
    most_blogs: AuthorBlogCount | None = None
    most_likes: AuthorLikeCount | None = None
