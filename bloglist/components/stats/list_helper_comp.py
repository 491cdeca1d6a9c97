"""
Blog statistics - pure aggregation over an in-memory list of blog records.

PURE LEAF-DOMAIN - These functions operate on in-memory data only:
- Take a sequence of blog records (BlogRecord DTOs or plain mappings)
- Read only ``author`` and ``likes``; every other field is ignored
- Never mutate the input, never touch the database, keep no state

Empty input is reported as ``None`` (no result), never as a zero-like value
of the wrong shape. A favourite blog with 0 likes is still a record.

Ties are broken by input order: the earliest record (favourite_blog) or the
author whose first blog appears earliest (most_blogs, most_likes) wins.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from bloglist.helpers.dto.stats_dto import AuthorBlogCount, AuthorLikes, BlogStats
from bloglist.helpers.exceptions import MalformedBlogRecordError

logger = logging.getLogger(__name__)

BlogT = TypeVar("BlogT")


def _field(blog: Any, name: str) -> Any:
    if isinstance(blog, Mapping):
        if name not in blog:
            raise MalformedBlogRecordError(f"Blog record is missing '{name}'")
        return blog[name]
    if not hasattr(blog, name):
        raise MalformedBlogRecordError(f"Blog record is missing '{name}'")
    return getattr(blog, name)


def _likes_of(blog: Any) -> int:
    likes = _field(blog, "likes")
    # bool is an int subclass; True likes is not a like count
    if isinstance(likes, bool) or not isinstance(likes, int) or likes < 0:
        raise MalformedBlogRecordError(f"Blog likes must be a non-negative integer, got {likes!r}")
    return likes


def _author_of(blog: Any) -> str:
    author = _field(blog, "author")
    if not isinstance(author, str):
        raise MalformedBlogRecordError(f"Blog author must be text, got {author!r}")
    return author


def _max_by_first_appearance(totals: dict[str, int]) -> tuple[str, int]:
    # dicts keep insertion order, and max() returns the first maximal item
    return max(totals.items(), key=lambda item: item[1])


def total_likes(blogs: Sequence[Any]) -> int:
    """Sum of likes across all blogs (0 for an empty sequence)."""
    return sum(_likes_of(blog) for blog in blogs)


def favourite_blog(blogs: Sequence[BlogT]) -> BlogT | None:
    """
    Return the blog with the most likes.

    Scans left to right and only replaces the current best on a strictly
    greater like count, so the first blog reaching the maximum wins.

    Returns:
        The record itself, or None when ``blogs`` is empty
    """
    best: BlogT | None = None
    best_likes = -1
    for blog in blogs:
        likes = _likes_of(blog)
        if likes > best_likes:
            best, best_likes = blog, likes
    return best


def most_blogs(blogs: Sequence[Any]) -> AuthorBlogCount | None:
    """Author with the most blogs and that count, or None for no blogs."""
    counts: dict[str, int] = {}
    for blog in blogs:
        author = _author_of(blog)
        counts[author] = counts.get(author, 0) + 1

    if not counts:
        return None
    author, count = _max_by_first_appearance(counts)
    return AuthorBlogCount(author=author, blogs=count)


def most_likes(blogs: Sequence[Any]) -> AuthorLikes | None:
    """Author whose blogs have the most likes in total, or None for no blogs."""
    sums: dict[str, int] = {}
    for blog in blogs:
        author = _author_of(blog)
        sums[author] = sums.get(author, 0) + _likes_of(blog)

    if not sums:
        return None
    author, likes = _max_by_first_appearance(sums)
    return AuthorLikes(author=author, likes=likes)


def compute_blog_stats(blogs: Sequence[Any]) -> BlogStats:
    """Compute all four statistics over one sequence."""
    logger.debug(f"[stats] Computing blog statistics over {len(blogs)} blog(s)")
    return BlogStats(
        total_likes=total_likes(blogs),
        favourite_blog=favourite_blog(blogs),
        most_blogs=most_blogs(blogs),
        most_likes=most_likes(blogs),
    )
