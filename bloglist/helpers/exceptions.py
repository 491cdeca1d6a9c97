"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class BlogNotFoundError(Exception):
    """Raised when a blog id does not resolve to a stored blog."""


class UserNotFoundError(Exception):
    """Raised when a user id or username does not resolve to a stored user."""


class AuthenticationError(Exception):
    """Raised when credentials or a bearer token cannot be verified."""


class PermissionDeniedError(Exception):
    """Raised when an authenticated user acts on a resource they do not own."""


class DuplicateUsernameError(ValueError):
    """Raised when registering a username that is already taken."""


class InvalidUserDataError(ValueError):
    """Raised when registration data fails validation (e.g. too-short password)."""


class InvalidBlogDataError(ValueError):
    """Raised when blog or comment data is missing required fields."""


class MalformedBlogRecordError(ValueError):
    """Raised when a blog record handed to the statistics helpers lacks author or likes."""
