"""Collections and indexes Bloglist needs in ArangoDB.

ensure_schema() runs on every start; it only adds what is missing.
"""

import logging

from arango.database import StandardDatabase
from arango.exceptions import CollectionCreateError, IndexCreateError

from bloglist.persistence.arango_client import SafeDatabase

logger = logging.getLogger(__name__)

DOCUMENT_COLLECTIONS = ["blogs", "users"]


def ensure_schema(db: StandardDatabase | SafeDatabase) -> None:
    """Ensure all collections and indexes exist.

    Args:
        db: ArangoDB database handle
    """
    _create_collections(db)
    _create_indexes(db)


def _create_collections(db: StandardDatabase | SafeDatabase) -> None:
    for collection_name in DOCUMENT_COLLECTIONS:
        if not db.has_collection(collection_name):
            try:
                db.create_collection(collection_name)
                logger.info(f"[bootstrap] Created collection '{collection_name}'")
            except CollectionCreateError:
                pass  # Created concurrently by another process


def _create_indexes(db: StandardDatabase | SafeDatabase) -> None:
    # Registration relies on this index to reject duplicate usernames
    _ensure_index(db, "users", ["username"], unique=True)
    _ensure_index(db, "blogs", ["user"], sparse=True)
    _ensure_index(db, "blogs", ["created_at"])


def _ensure_index(
    db: StandardDatabase | SafeDatabase,
    collection: str,
    fields: list[str],
    unique: bool = False,
    sparse: bool = False,
) -> None:
    """Create a persistent index if it doesn't exist."""
    try:
        db.collection(collection).add_persistent_index(fields=fields, unique=unique, sparse=sparse)
    except IndexCreateError:
        pass  # Index already exists
