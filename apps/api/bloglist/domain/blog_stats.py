"""Aggregate statistics over a list of blogs.

Ties are resolved in favor of the blog or author seen last.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence

from bloglist.repositories.memory import BlogRecord
from bloglist.schemas.blog import AuthorBlogCount, AuthorLikeCount, BlogStats, FavoriteBlog


def total_likes(blogs: Sequence[BlogRecord]) -> int:
    return sum(blog.likes for blog in blogs)


def favorite_blog(blogs: Sequence[BlogRecord]) -> FavoriteBlog | None:
    favorite: BlogRecord | None = None
    for blog in blogs:
        if favorite is None or blog.likes >= favorite.likes:
            favorite = blog
    if favorite is None:
        return None
    return FavoriteBlog(title=favorite.title, author=favorite.author, likes=favorite.likes)


def _leader(counts: dict[str | None, int]) -> str | None:
    # None is a real key here (authorless blogs), so rank by position instead of a placeholder.
    entries = list(counts.items())
    best = max(range(len(entries)), key=lambda index: (entries[index][1], index))
    return entries[best][0]


def most_blogs(blogs: Sequence[BlogRecord]) -> AuthorBlogCount | None:
    if not blogs:
        return None
    counts = Counter(blog.author for blog in blogs)
    author = _leader(counts)
    return AuthorBlogCount(author=author, blogs=counts[author])


def most_likes(blogs: Sequence[BlogRecord]) -> AuthorLikeCount | None:
    if not blogs:
        return None
    likes_by_author: dict[str | None, int] = defaultdict(int)
    for blog in blogs:
        likes_by_author[blog.author] += blog.likes
    author = _leader(likes_by_author)
    return AuthorLikeCount(author=author, likes=likes_by_author[author])


def summarize(blogs: Sequence[BlogRecord]) -> BlogStats:
    return BlogStats(
        total_likes=total_likes(blogs),
        favorite_blog=favorite_blog(blogs),
        most_blogs=most_blogs(blogs),
        most_likes=most_likes(blogs),
    )
