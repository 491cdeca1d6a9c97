"""
Database operations package.

Contains collection-specific operations classes (one per collection).
Each *_aql.py file owns all AQL for that collection.
"""

from .blogs_aql import BlogOperations
from .users_aql import UserOperations

__all__ = [
    "BlogOperations",
    "UserOperations",
]
