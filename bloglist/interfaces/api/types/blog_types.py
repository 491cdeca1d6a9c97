"""
Blog API request and response types.

External API contracts for blog endpoints.

Architecture:
- These types are owned by the interface layer
- They transform internal DTOs via .from_dto() classmethods, encoding ids for HTTP
- Services and lower layers should NOT import from this module
"""

from __future__ import annotations

from pydantic import BaseModel
from typing_extensions import Self

from bloglist.helpers.dto.blog_dto import BlogOwner, BlogRecord, BlogView, CreateBlogParams, UpdateBlogParams
from bloglist.helpers.dto.stats_dto import AuthorBlogCount, AuthorLikes, BlogStats
from bloglist.interfaces.api.id_codec import encode_id

# ──────────────────────────────────────────────────────────────────────
# Requests
# ──────────────────────────────────────────────────────────────────────


class CreateBlogRequest(BaseModel):
    """Body of POST /api/blogs. Presence of title/url is checked by the service."""

    title: str | None = None
    author: str = ""
    url: str | None = None
    likes: int = 0

    def to_params(self) -> CreateBlogParams:
        return CreateBlogParams(title=self.title, url=self.url, author=self.author, likes=self.likes)


class UpdateBlogRequest(BaseModel):
    """Body of PUT /api/blogs/{id} (full replacement of editable fields)."""

    title: str
    author: str = ""
    url: str
    likes: int = 0

    def to_params(self) -> UpdateBlogParams:
        return UpdateBlogParams(title=self.title, author=self.author, url=self.url, likes=self.likes)


class CommentRequest(BaseModel):
    comment: str | None = None


# ──────────────────────────────────────────────────────────────────────
# Responses
# ──────────────────────────────────────────────────────────────────────


class BlogOwnerResponse(BaseModel):
    id: str
    username: str
    name: str | None = None

    @classmethod
    def from_dto(cls, owner: BlogOwner) -> Self:
        return cls(id=encode_id(owner.id), username=owner.username, name=owner.name)


class BlogSummaryResponse(BaseModel):
    """Blog without owner or comments (used inside statistics)."""

    id: str
    title: str
    author: str
    url: str
    likes: int

    @classmethod
    def from_dto(cls, blog: BlogRecord) -> Self:
        return cls(id=encode_id(blog.id), title=blog.title, author=blog.author, url=blog.url, likes=blog.likes)


class BlogResponse(BaseModel):
    """Single blog with its creator populated."""

    id: str
    title: str
    author: str
    url: str
    likes: int
    comments: list[str]
    user: BlogOwnerResponse | None = None

    @classmethod
    def from_dto(cls, view: BlogView) -> Self:
        blog = view.blog
        return cls(
            id=encode_id(blog.id),
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
            comments=list(blog.comments),
            user=BlogOwnerResponse.from_dto(view.owner) if view.owner else None,
        )


class AuthorBlogCountResponse(BaseModel):
    author: str
    blogs: int

    @classmethod
    def from_dto(cls, result: AuthorBlogCount) -> Self:
        return cls(author=result.author, blogs=result.blogs)


class AuthorLikesResponse(BaseModel):
    author: str
    likes: int

    @classmethod
    def from_dto(cls, result: AuthorLikes) -> Self:
        return cls(author=result.author, likes=result.likes)


class BlogStatsResponse(BaseModel):
    """
    Aggregate statistics over all blogs.

    ``null`` fields mean there were no blogs to compute them from.
    """

    total_likes: int
    favourite_blog: BlogSummaryResponse | None
    most_blogs: AuthorBlogCountResponse | None
    most_likes: AuthorLikesResponse | None

    @classmethod
    def from_dto(cls, stats: BlogStats) -> Self:
        return cls(
            total_likes=stats.total_likes,
            favourite_blog=BlogSummaryResponse.from_dto(stats.favourite_blog) if stats.favourite_blog else None,
            most_blogs=AuthorBlogCountResponse.from_dto(stats.most_blogs) if stats.most_blogs else None,
            most_likes=AuthorLikesResponse.from_dto(stats.most_likes) if stats.most_likes else None,
        )
