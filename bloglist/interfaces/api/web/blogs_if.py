"""Blog endpoints: CRUD, comments and statistics."""

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Response

from bloglist.helpers.exceptions import (
    BlogNotFoundError,
    InvalidBlogDataError,
    MalformedBlogRecordError,
    PermissionDeniedError,
)
from bloglist.helpers.logging_helper import sanitize_exception_message
from bloglist.interfaces.api.auth import get_current_user
from bloglist.interfaces.api.id_codec import decode_path_id
from bloglist.interfaces.api.types.blog_types import (
    BlogResponse,
    BlogStatsResponse,
    CommentRequest,
    CreateBlogRequest,
    UpdateBlogRequest,
)
from bloglist.interfaces.api.web.dependencies import get_blog_service, get_stats_service

if TYPE_CHECKING:
    from bloglist.helpers.dto.user_dto import UserRecord
    from bloglist.services.domain.blog_svc import BlogService
    from bloglist.services.domain.stats_svc import StatsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blogs", tags=["Blogs"])


# ──────────────────────────────────────────────────────────────────────
# Queries
# ──────────────────────────────────────────────────────────────────────


@router.get("")
async def list_blogs(
    blog_service: "BlogService" = Depends(get_blog_service),
) -> list[BlogResponse]:
    """List all blogs with their creators."""
    return [BlogResponse.from_dto(view) for view in blog_service.list_blogs()]


@router.get("/stats")
async def blog_stats(
    stats_service: "StatsService" = Depends(get_stats_service),
) -> BlogStatsResponse:
    """Total likes, favourite blog, most prolific and most liked author."""
    try:
        return BlogStatsResponse.from_dto(stats_service.get_blog_stats())
    except MalformedBlogRecordError as e:
        raise HTTPException(status_code=500, detail=sanitize_exception_message(e, "blog data is corrupt")) from e


@router.get("/{blog_id}")
async def get_blog(
    blog_id: str,
    blog_service: "BlogService" = Depends(get_blog_service),
) -> BlogResponse:
    """Get a single blog."""
    blog_id = decode_path_id(blog_id, "blogs")
    try:
        return BlogResponse.from_dto(blog_service.get_blog(blog_id))
    except BlogNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None


# ──────────────────────────────────────────────────────────────────────
# Commands (token required)
# ──────────────────────────────────────────────────────────────────────


@router.post("", status_code=201)
async def create_blog(
    request: CreateBlogRequest,
    user: "UserRecord" = Depends(get_current_user),
    blog_service: "BlogService" = Depends(get_blog_service),
) -> BlogResponse:
    """Create a blog owned by the caller."""
    try:
        view = blog_service.create_blog(request.to_params(), user)
    except InvalidBlogDataError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    return BlogResponse.from_dto(view)


@router.put("/{blog_id}")
async def update_blog(
    blog_id: str,
    request: UpdateBlogRequest,
    user: "UserRecord" = Depends(get_current_user),
    blog_service: "BlogService" = Depends(get_blog_service),
) -> BlogResponse:
    """Replace title, author, url and likes of a blog."""
    blog_id = decode_path_id(blog_id, "blogs")
    try:
        view = blog_service.update_blog(blog_id, request.to_params())
    except BlogNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None
    except InvalidBlogDataError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    logger.info(f"[API] '{user.username}' updated blog {blog_id}")
    return BlogResponse.from_dto(view)


@router.delete("/{blog_id}", status_code=204)
async def delete_blog(
    blog_id: str,
    user: "UserRecord" = Depends(get_current_user),
    blog_service: "BlogService" = Depends(get_blog_service),
) -> Response:
    """Delete a blog. Only its creator may do so; unknown ids succeed silently."""
    blog_id = decode_path_id(blog_id, "blogs")
    try:
        blog_service.delete_blog(blog_id, user)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=401, detail=str(e)) from None
    return Response(status_code=204)


@router.post("/{blog_id}/comments", status_code=201)
async def add_comment(
    blog_id: str,
    request: CommentRequest,
    user: "UserRecord" = Depends(get_current_user),
    blog_service: "BlogService" = Depends(get_blog_service),
) -> BlogResponse:
    """Append a comment to a blog."""
    blog_id = decode_path_id(blog_id, "blogs")
    try:
        view = blog_service.add_comment(blog_id, request.comment)
    except BlogNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None
    except InvalidBlogDataError as e:
        raise HTTPException(status_code=400, detail=str(e)) from None
    return BlogResponse.from_dto(view)
