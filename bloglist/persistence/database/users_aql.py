"""User operations for ArangoDB."""

from typing import TYPE_CHECKING, Any, cast

from arango.exceptions import DocumentInsertError

from bloglist.helpers.exceptions import DuplicateUsernameError
from bloglist.helpers.time_helper import now_ms
from bloglist.persistence.arango_client import DatabaseLike

if TYPE_CHECKING:
    from arango.cursor import Cursor

# ArangoDB "unique constraint violated"
ERROR_ARANGO_UNIQUE_CONSTRAINT_VIOLATED = 1210


class UserOperations:
    """Operations for the users collection (username has a unique index)."""

    def __init__(self, db: DatabaseLike) -> None:
        self.db = db
        self.collection = db.collection("users")

    def insert_user(self, username: str, name: str | None, password_hash: str) -> dict[str, Any]:
        """Insert a new user.

        Returns:
            The stored document

        Raises:
            DuplicateUsernameError: If the username is already taken

        """
        try:
            result = cast(
                "dict[str, Any]",
                self.collection.insert(
                    {
                        "username": username,
                        "name": name,
                        "password_hash": password_hash,
                        "blogs": [],
                        "created_at": now_ms(),
                    },
                    return_new=True,
                ),
            )
        except DocumentInsertError as e:
            if e.error_code == ERROR_ARANGO_UNIQUE_CONSTRAINT_VIOLATED:
                raise DuplicateUsernameError("username must be unique") from e
            raise
        return cast("dict[str, Any]", result["new"])

    def get_user(self, user_id: str) -> dict[str, Any] | None:
        """Get user by _id."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
            FOR user IN users
                FILTER user._id == @user_id
                LIMIT 1
                RETURN user
            """,
                bind_vars={"user_id": user_id},
            ),
        )
        return next(cursor, None)

    def get_user_by_username(self, username: str) -> dict[str, Any] | None:
        """Get user by username."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
            FOR user IN users
                FILTER user.username == @username
                LIMIT 1
                RETURN user
            """,
                bind_vars={"username": username},
            ),
        )
        return next(cursor, None)

    def get_users_by_ids(self, user_ids: list[str]) -> list[dict[str, Any]]:
        """Get several users at once (missing ids are skipped)."""
        if not user_ids:
            return []
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
            FOR user IN users
                FILTER user._id IN @user_ids
                RETURN user
            """,
                bind_vars={"user_ids": user_ids},
            ),
        )
        return list(cursor)

    def list_users(self) -> list[dict[str, Any]]:
        """List all users in registration order."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
            FOR user IN users
                SORT user.created_at, TO_NUMBER(user._key)
                RETURN user
            """,
            ),
        )
        return list(cursor)

    def add_blog_ref(self, user_id: str, blog_id: str) -> None:
        """Record that the user created the blog."""
        self.db.aql.execute(
            """
            FOR user IN users
                FILTER user._id == @user_id
                UPDATE user WITH { blogs: APPEND(NOT_NULL(user.blogs, []), [@blog_id], true) } IN users
            """,
            bind_vars={"user_id": user_id, "blog_id": blog_id},
        )

    def remove_blog_ref(self, user_id: str, blog_id: str) -> None:
        """Forget a deleted blog on its owner."""
        self.db.aql.execute(
            """
            FOR user IN users
                FILTER user._id == @user_id
                UPDATE user WITH { blogs: REMOVE_VALUE(NOT_NULL(user.blogs, []), @blog_id) } IN users
            """,
            bind_vars={"user_id": user_id, "blog_id": blog_id},
        )
