"""
Blog service - CRUD for blogs with ownership rules.

ARCHITECTURE:
- Reads/writes documents through persistence (db.blogs, db.users)
- Returns DTOs with the owning user populated
- Raises helpers.exceptions errors; interfaces map them to HTTP status codes
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from bloglist.helpers.dto.blog_dto import BlogOwner, BlogRecord, BlogView, CreateBlogParams, UpdateBlogParams
from bloglist.helpers.exceptions import BlogNotFoundError, InvalidBlogDataError, PermissionDeniedError

if TYPE_CHECKING:
    from bloglist.helpers.dto.user_dto import UserRecord
    from bloglist.persistence.db import Database

logger = logging.getLogger(__name__)


class BlogService:
    """Service for creating, reading, updating, deleting and commenting on blogs."""

    def __init__(self, db: Database) -> None:
        self._db = db

    # ----------------------------------------------------------------------
    # Queries
    # ----------------------------------------------------------------------

    def list_blogs(self) -> list[BlogView]:
        """All blogs in creation order, each with its owner populated."""
        return self._populate(self._db.blogs.list_blogs())

    def get_blog(self, blog_id: str) -> BlogView:
        """
        Get one blog.

        Raises:
            BlogNotFoundError: If no blog has this id
        """
        doc = self._db.blogs.get_blog(blog_id)
        if doc is None:
            raise BlogNotFoundError("blog not found")
        return self._populate([doc])[0]

    # ----------------------------------------------------------------------
    # Commands
    # ----------------------------------------------------------------------

    def create_blog(self, params: CreateBlogParams, user: UserRecord) -> BlogView:
        """
        Create a blog owned by ``user`` and link it from the user's blog list.

        Raises:
            InvalidBlogDataError: If title or url is missing, or likes is negative
        """
        if not params.title or not params.url:
            raise InvalidBlogDataError("title or url missing")
        self._check_likes(params.likes)

        doc = self._db.blogs.insert_blog(
            title=params.title,
            author=params.author or "",
            url=params.url,
            likes=params.likes,
            user_id=user.id,
        )
        self._db.users.add_blog_ref(user.id, doc["_id"])
        logger.info(f"[BlogService] '{user.username}' created blog {doc['_id']}")
        return self._populate([doc])[0]

    def update_blog(self, blog_id: str, params: UpdateBlogParams) -> BlogView:
        """
        Replace title, author, url and likes of a blog.

        Raises:
            BlogNotFoundError: If no blog has this id
            InvalidBlogDataError: If title or url is empty, or likes is negative
        """
        if not params.title or not params.url:
            raise InvalidBlogDataError("title or url missing")
        self._check_likes(params.likes)

        doc = self._db.blogs.update_blog(
            blog_id,
            {"title": params.title, "author": params.author, "url": params.url, "likes": params.likes},
        )
        if doc is None:
            raise BlogNotFoundError("blog not found")
        return self._populate([doc])[0]

    def delete_blog(self, blog_id: str, user: UserRecord) -> bool:
        """
        Delete a blog if ``user`` created it.

        Blogs without a recorded owner may be deleted by any authenticated user.

        Returns:
            False if the blog did not exist (nothing to do), True if deleted

        Raises:
            PermissionDeniedError: If the blog belongs to another user
        """
        doc = self._db.blogs.get_blog(blog_id)
        if doc is None:
            return False

        owner_id = doc.get("user")
        if owner_id and owner_id != user.id:
            logger.warning(f"[BlogService] '{user.username}' tried to delete blog {blog_id} owned by {owner_id}")
            raise PermissionDeniedError("only the creator can delete a blog")

        self._db.blogs.delete_blog(blog_id)
        if owner_id:
            self._db.users.remove_blog_ref(owner_id, blog_id)
        logger.info(f"[BlogService] '{user.username}' deleted blog {blog_id}")
        return True

    def add_comment(self, blog_id: str, comment: str | None) -> BlogView:
        """
        Append an anonymous comment to a blog.

        Raises:
            BlogNotFoundError: If no blog has this id
            InvalidBlogDataError: If the comment is empty
        """
        if self._db.blogs.get_blog(blog_id) is None:
            raise BlogNotFoundError("blog not found")
        if not comment or not comment.strip():
            raise InvalidBlogDataError("comment not included")

        doc = self._db.blogs.add_comment(blog_id, comment.strip())
        if doc is None:
            # Deleted between the existence check and the update
            raise BlogNotFoundError("blog not found")
        return self._populate([doc])[0]

    # ----------------------------------------------------------------------
    # Private helpers
    # ----------------------------------------------------------------------

    @staticmethod
    def _check_likes(likes: int) -> None:
        if likes < 0:
            raise InvalidBlogDataError("likes must be a non-negative integer")

    def _populate(self, docs: list[dict[str, Any]]) -> list[BlogView]:
        """Attach owners to blog documents with a single user lookup."""
        owner_ids = sorted({doc["user"] for doc in docs if doc.get("user")})
        owners = {
            u["_id"]: BlogOwner(id=u["_id"], username=u["username"], name=u.get("name"))
            for u in self._db.users.get_users_by_ids(owner_ids)
        }
        views = []
        for doc in docs:
            blog = BlogRecord.from_doc(doc)
            views.append(BlogView(blog=blog, owner=owners.get(blog.user_id) if blog.user_id else None))
        return views
