"""
Blog statistics service - orchestrates between persistence and the stats component.

ARCHITECTURE:
- Fetches blogs from persistence (db.blogs)
- Passes them to components.stats for computation
- Returns the BlogStats DTO to the interface layer
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bloglist.components.stats.list_helper_comp import compute_blog_stats
from bloglist.helpers.dto.blog_dto import BlogRecord

if TYPE_CHECKING:
    from bloglist.helpers.dto.stats_dto import BlogStats
    from bloglist.persistence.db import Database

logger = logging.getLogger(__name__)


class StatsService:
    """Service for aggregate statistics over all stored blogs."""

    def __init__(self, db: Database) -> None:
        self._db = db

    def get_blog_stats(self) -> BlogStats:
        """Total likes, favourite blog, most prolific author and most liked author."""
        blogs = [BlogRecord.from_doc(doc) for doc in self._db.blogs.list_blogs()]
        logger.info(f"[StatsService] Computing stats over {len(blogs)} blog(s)")
        return compute_blog_stats(blogs)
