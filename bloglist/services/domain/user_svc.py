"""
User service - registration and user listings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from bloglist.helpers.dto.user_dto import RegisterUserParams, UserBlogSummary, UserRecord, UserView
from bloglist.helpers.exceptions import DuplicateUsernameError, InvalidUserDataError, UserNotFoundError

if TYPE_CHECKING:
    from bloglist.persistence.db import Database
    from bloglist.services.infrastructure.auth_svc import AuthService

logger = logging.getLogger(__name__)

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3
# bcrypt only hashes the first 72 bytes
MAX_PASSWORD_BYTES = 72


class UserService:
    """Service for registering users and listing them with their blogs."""

    def __init__(self, db: Database, auth: AuthService) -> None:
        self._db = db
        self._auth = auth

    def register_user(self, params: RegisterUserParams) -> UserView:
        """
        Create a new user with a hashed password.

        Raises:
            InvalidUserDataError: If username or password is missing, too short or too long
            DuplicateUsernameError: If the username is already taken
        """
        username = (params.username or "").strip()
        password = params.password or ""

        if not username or not password:
            raise InvalidUserDataError("username and password are required")
        if len(username) < MIN_USERNAME_LENGTH:
            raise InvalidUserDataError(f"username must be at least {MIN_USERNAME_LENGTH} characters long")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidUserDataError(f"password must be at least {MIN_PASSWORD_LENGTH} characters long")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidUserDataError(f"password must be at most {MAX_PASSWORD_BYTES} bytes long")

        # The unique index catches races; this check gives the common case a clean error
        if self._db.users.get_user_by_username(username) is not None:
            raise DuplicateUsernameError("username must be unique")

        doc = self._db.users.insert_user(
            username=username,
            name=params.name,
            password_hash=self._auth.hash_password(password),
        )
        logger.info(f"[UserService] Registered user '{username}'")
        return self._to_views([doc])[0]

    def list_users(self) -> list[UserView]:
        """All users with their blogs populated."""
        return self._to_views(self._db.users.list_users())

    def get_user(self, user_id: str) -> UserView:
        """
        Raises:
            UserNotFoundError: If no user has this id
        """
        doc = self._db.users.get_user(user_id)
        if doc is None:
            raise UserNotFoundError("user not found")
        return self._to_views([doc])[0]

    def _to_views(self, docs: list[dict[str, Any]]) -> list[UserView]:
        """Strip password hashes and populate blog summaries with one blog lookup."""
        users = [UserRecord.from_doc(doc) for doc in docs]
        blog_ids = sorted({blog_id for user in users for blog_id in user.blog_ids})
        blogs = {
            b["_id"]: UserBlogSummary(
                id=b["_id"],
                title=b.get("title", ""),
                author=b.get("author") or "",
                url=b.get("url", ""),
                likes=int(b.get("likes") or 0),
            )
            for b in self._db.blogs.list_blogs_by_ids(blog_ids)
        }
        return [
            UserView(
                id=user.id,
                username=user.username,
                name=user.name,
                blogs=[blogs[blog_id] for blog_id in user.blog_ids if blog_id in blogs],
            )
            for user in users
        ]
