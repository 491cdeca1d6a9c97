"""
Blog domain DTOs.

Cross-layer data contracts for blog operations (persistence rows → services → interfaces).
Ids are real ArangoDB _id values ("blogs/123"); only interfaces encode them for HTTP.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BlogRecord:
    """Single stored blog."""

    id: str
    title: str
    author: str
    url: str
    likes: int = 0
    comments: list[str] = field(default_factory=list)
    user_id: str | None = None  # Legacy blogs may have no owner

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> BlogRecord:
        """Build from an ArangoDB document."""
        return cls(
            id=doc["_id"],
            title=doc.get("title", ""),
            author=doc.get("author") or "",
            url=doc.get("url", ""),
            likes=int(doc.get("likes") or 0),
            comments=list(doc.get("comments") or []),
            user_id=doc.get("user"),
        )


@dataclass
class BlogOwner:
    """Owner fields embedded into blog responses."""

    id: str
    username: str
    name: str | None


@dataclass
class BlogView:
    """Blog with its owner populated (what GET /api/blogs returns per item)."""

    blog: BlogRecord
    owner: BlogOwner | None


@dataclass
class CreateBlogParams:
    """Parameters for BlogService.create_blog."""

    title: str | None
    url: str | None
    author: str = ""
    likes: int = 0


@dataclass
class UpdateBlogParams:
    """Full replacement of the editable blog fields (PUT semantics)."""

    title: str
    author: str
    url: str
    likes: int
