"""
Database facade.

Owns one ArangoDB handle and exposes the per-collection operations objects:
    db.blogs  -> BlogOperations
    db.users  -> UserOperations
"""

from __future__ import annotations

import logging

from bloglist.persistence.arango_client import DatabaseLike, SafeDatabase, create_arango_client
from bloglist.persistence.database.blogs_aql import BlogOperations
from bloglist.persistence.database.users_aql import UserOperations

logger = logging.getLogger(__name__)

__all__ = ["Database"]


class Database:
    """Application database: connection handle plus collection operations."""

    def __init__(
        self,
        hosts: str = "http://localhost:8529",
        username: str = "root",
        password: str = "",
        db_name: str = "bloglist",
        handle: DatabaseLike | None = None,
    ) -> None:
        """
        Connect to ArangoDB, or wrap an existing handle (used by tests).
        """
        self.db_name = db_name
        self.db: DatabaseLike = handle if handle is not None else create_arango_client(
            hosts=hosts, username=username, password=password, db_name=db_name
        )
        self.blogs = BlogOperations(self.db)
        self.users = UserOperations(self.db)

    def close(self) -> None:
        """Release the connection pool."""
        if isinstance(self.db, SafeDatabase):
            self.db.close()
        logger.info(f"[Database] Closed connection to '{self.db_name}'")
