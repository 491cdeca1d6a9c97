"""
FastAPI dependency injection helpers for API endpoints.

ARCHITECTURE:
- Endpoints should ONLY inject services, never Database or raw infrastructure
- Services encapsulate all business logic and data access
- Endpoints are thin presentation layers that call services and format responses
- Tests replace these providers via api_app.dependency_overrides
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import HTTPException

if TYPE_CHECKING:
    from bloglist.services.domain.blog_svc import BlogService
    from bloglist.services.domain.stats_svc import StatsService
    from bloglist.services.domain.user_svc import UserService
    from bloglist.services.infrastructure.auth_svc import AuthService


def _get_service(name: str, label: str) -> Any:
    from bloglist.app import application

    service = application.services.get(name)
    if service is None:
        raise HTTPException(status_code=503, detail=f"{label} not available")
    return service


def get_auth_service() -> AuthService:
    """Get AuthService instance."""
    return _get_service("auth", "Auth service")  # type: ignore[no-any-return]


def get_blog_service() -> BlogService:
    """Get BlogService instance."""
    return _get_service("blogs", "Blog service")  # type: ignore[no-any-return]


def get_user_service() -> UserService:
    """Get UserService instance."""
    return _get_service("users", "User service")  # type: ignore[no-any-return]


def get_stats_service() -> StatsService:
    """Get StatsService instance."""
    return _get_service("stats", "Stats service")  # type: ignore[no-any-return]
