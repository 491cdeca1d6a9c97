"""
Domain-specific DTOs (Data Transfer Objects) used across multiple layers.

Domain-specific DTOs live in helpers/dto/<domain>_dto.py and form cross-layer contracts
within that domain (interfaces → services → components).

Rules for DTO modules:
- Import only stdlib and typing (no bloglist.* imports)
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no DB access, no business logic
"""

from .blog_dto import BlogOwner, BlogRecord, BlogView, CreateBlogParams, UpdateBlogParams
from .stats_dto import AuthorBlogCount, AuthorLikes, BlogStats
from .user_dto import LoginResult, RegisterUserParams, TokenClaims, UserBlogSummary, UserRecord, UserView

__all__ = [
    "AuthorBlogCount",
    "AuthorLikes",
    "BlogOwner",
    "BlogRecord",
    "BlogStats",
    "BlogView",
    "CreateBlogParams",
    "LoginResult",
    "RegisterUserParams",
    "TokenClaims",
    "UpdateBlogParams",
    "UserBlogSummary",
    "UserRecord",
    "UserView",
]
