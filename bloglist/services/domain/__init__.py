"""
Domain package.
"""

from .blog_svc import BlogService
from .stats_svc import StatsService
from .user_svc import UserService

__all__ = [
    "BlogService",
    "StatsService",
    "UserService",
]
