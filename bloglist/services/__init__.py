"""
Services package.
"""

from .domain import BlogService, StatsService, UserService
from .infrastructure import AuthConfig, AuthService, ConfigService

__all__ = [
    "AuthConfig",
    "AuthService",
    "BlogService",
    "ConfigService",
    "StatsService",
    "UserService",
]
