"""
Blog statistics DTOs.

Results of the pure aggregation helpers in components/stats.
A result of ``None`` always means "no data" (empty input); these types only
ever describe real results, so zero values here are genuine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AuthorBlogCount:
    """Author with the most blogs, paired with that count."""

    author: str
    blogs: int


@dataclass(frozen=True)
class AuthorLikes:
    """Author with the most summed likes, paired with that sum."""

    author: str
    likes: int


@dataclass
class BlogStats:
    """All four statistics computed over one blog sequence."""

    total_likes: int
    favourite_blog: Any | None  # The input record itself (BlogRecord or mapping)
    most_blogs: AuthorBlogCount | None
    most_likes: AuthorLikes | None
