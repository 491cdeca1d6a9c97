"""
API request/response types (Pydantic).
"""

from .auth_types import LoginRequest, LoginResponse
from .blog_types import (
    AuthorBlogCountResponse,
    AuthorLikesResponse,
    BlogOwnerResponse,
    BlogResponse,
    BlogStatsResponse,
    BlogSummaryResponse,
    CommentRequest,
    CreateBlogRequest,
    UpdateBlogRequest,
)
from .user_types import RegisterUserRequest, UserBlogResponse, UserResponse

__all__ = [
    "AuthorBlogCountResponse",
    "AuthorLikesResponse",
    "BlogOwnerResponse",
    "BlogResponse",
    "BlogStatsResponse",
    "BlogSummaryResponse",
    "CommentRequest",
    "CreateBlogRequest",
    "LoginRequest",
    "LoginResponse",
    "RegisterUserRequest",
    "UpdateBlogRequest",
    "UserBlogResponse",
    "UserResponse",
]
