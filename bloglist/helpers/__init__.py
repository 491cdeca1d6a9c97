"""
Helpers package.
"""

from .exceptions import (
    AuthenticationError,
    BlogNotFoundError,
    DuplicateUsernameError,
    InvalidBlogDataError,
    InvalidUserDataError,
    MalformedBlogRecordError,
    PermissionDeniedError,
    UserNotFoundError,
)
from .logging_helper import configure_logging, sanitize_exception_message
from .time_helper import now_ms, now_s

__all__ = [
    "AuthenticationError",
    "BlogNotFoundError",
    "DuplicateUsernameError",
    "InvalidBlogDataError",
    "InvalidUserDataError",
    "MalformedBlogRecordError",
    "PermissionDeniedError",
    "UserNotFoundError",
    "configure_logging",
    "now_ms",
    "now_s",
    "sanitize_exception_message",
]
