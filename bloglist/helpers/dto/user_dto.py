"""
User and authentication DTOs.

Cross-layer data contracts for registration, login and token claims.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class UserRecord:
    """Stored user, including the password hash (never leaves the service layer)."""

    id: str
    username: str
    name: str | None
    password_hash: str
    blog_ids: list[str] = field(default_factory=list)

    @classmethod
    def from_doc(cls, doc: dict[str, Any]) -> UserRecord:
        """Build from an ArangoDB document."""
        return cls(
            id=doc["_id"],
            username=doc["username"],
            name=doc.get("name"),
            password_hash=doc.get("password_hash", ""),
            blog_ids=list(doc.get("blogs") or []),
        )


@dataclass
class UserBlogSummary:
    """Blog fields embedded into user responses."""

    id: str
    title: str
    author: str
    url: str
    likes: int


@dataclass
class UserView:
    """User as exposed over HTTP: no password hash, blogs populated."""

    id: str
    username: str
    name: str | None
    blogs: list[UserBlogSummary]


@dataclass
class RegisterUserParams:
    """Parameters for UserService.register_user."""

    username: str | None
    password: str | None
    name: str | None = None


@dataclass
class TokenClaims:
    """Verified contents of a bearer token."""

    id: str
    username: str


@dataclass
class LoginResult:
    """Result from AuthService.login."""

    token: str
    username: str
    name: str | None
