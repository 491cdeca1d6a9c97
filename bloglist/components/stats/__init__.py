"""
Blog statistics package.
"""

from bloglist.helpers.dto.stats_dto import AuthorBlogCount, AuthorLikes, BlogStats

from .list_helper_comp import compute_blog_stats, favourite_blog, most_blogs, most_likes, total_likes

__all__ = [
    "AuthorBlogCount",
    "AuthorLikes",
    "BlogStats",
    "compute_blog_stats",
    "favourite_blog",
    "most_blogs",
    "most_likes",
    "total_likes",
]
