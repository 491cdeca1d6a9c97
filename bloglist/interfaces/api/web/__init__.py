"""
Web API package.

Exports the combined router for all /api endpoints.
"""

from .router import router

__all__ = ["router"]
