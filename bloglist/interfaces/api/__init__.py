"""
API layer package for Bloglist.
Exports FastAPI app and auth dependencies.
"""

from bloglist.interfaces.api.api_app import api_app
from bloglist.interfaces.api.auth import auth_scheme, get_current_user

__all__ = [
    "api_app",
    "auth_scheme",
    "get_current_user",
]
