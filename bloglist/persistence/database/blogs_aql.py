"""Blog operations for ArangoDB."""

from typing import TYPE_CHECKING, Any, cast

from bloglist.helpers.time_helper import now_ms
from bloglist.persistence.arango_client import DatabaseLike

if TYPE_CHECKING:
    from arango.cursor import Cursor


class BlogOperations:
    """Operations for the blogs collection."""

    def __init__(self, db: DatabaseLike) -> None:
        self.db = db
        self.collection = db.collection("blogs")

    def insert_blog(self, title: str, author: str, url: str, likes: int, user_id: str | None) -> dict[str, Any]:
        """Insert a new blog.

        Returns:
            The stored document (including _id and _key)

        """
        result = cast(
            "dict[str, Any]",
            self.collection.insert(
                {
                    "title": title,
                    "author": author,
                    "url": url,
                    "likes": likes,
                    "comments": [],
                    "user": user_id,
                    "created_at": now_ms(),
                },
                return_new=True,
            ),
        )
        return cast("dict[str, Any]", result["new"])

    def get_blog(self, blog_id: str) -> dict[str, Any] | None:
        """Get blog by _id, or None if not found."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
            FOR blog IN blogs
                FILTER blog._id == @blog_id
                LIMIT 1
                RETURN blog
            """,
                bind_vars={"blog_id": blog_id},
            ),
        )
        return next(cursor, None)

    def list_blogs(self) -> list[dict[str, Any]]:
        """List all blogs in insertion order."""
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
            FOR blog IN blogs
                SORT blog.created_at, TO_NUMBER(blog._key)
                RETURN blog
            """,
            ),
        )
        return list(cursor)

    def list_blogs_by_ids(self, blog_ids: list[str]) -> list[dict[str, Any]]:
        """Get the blogs with the given _ids (missing ids are skipped)."""
        if not blog_ids:
            return []
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
            FOR blog IN blogs
                FILTER blog._id IN @blog_ids
                SORT blog.created_at, TO_NUMBER(blog._key)
                RETURN blog
            """,
                bind_vars={"blog_ids": blog_ids},
            ),
        )
        return list(cursor)

    def update_blog(self, blog_id: str, fields: dict[str, Any]) -> dict[str, Any] | None:
        """Merge fields into a blog.

        Returns:
            The updated document, or None if the blog does not exist

        """
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
            FOR blog IN blogs
                FILTER blog._id == @blog_id
                UPDATE blog WITH @fields IN blogs
                RETURN NEW
            """,
                bind_vars={"blog_id": blog_id, "fields": fields},
            ),
        )
        return next(cursor, None)

    def add_comment(self, blog_id: str, comment: str) -> dict[str, Any] | None:
        """Append a comment to a blog.

        Returns:
            The updated document, or None if the blog does not exist

        """
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
            FOR blog IN blogs
                FILTER blog._id == @blog_id
                UPDATE blog WITH { comments: APPEND(NOT_NULL(blog.comments, []), [@comment]) } IN blogs
                RETURN NEW
            """,
                bind_vars={"blog_id": blog_id, "comment": comment},
            ),
        )
        return next(cursor, None)

    def delete_blog(self, blog_id: str) -> bool:
        """Delete a blog.

        Returns:
            True if a blog was removed

        """
        cursor = cast(
            "Cursor",
            self.db.aql.execute(
                """
            FOR blog IN blogs
                FILTER blog._id == @blog_id
                REMOVE blog IN blogs
                RETURN 1
            """,
                bind_vars={"blog_id": blog_id},
            ),
        )
        return len(list(cursor)) > 0
