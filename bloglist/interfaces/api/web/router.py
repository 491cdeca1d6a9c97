"""
Combined router for all API endpoints.

Aggregates the blog, user and login routers under the /api prefix.
"""

from fastapi import APIRouter

from bloglist.interfaces.api.web import blogs_if, login_if, users_if

router = APIRouter(prefix="/api")

router.include_router(blogs_if.router)
router.include_router(users_if.router)
router.include_router(login_if.router)
