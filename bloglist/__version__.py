"""Version information for Bloglist."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to API or data structures
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Statistics and ownership fixes
#         - /api/blogs/stats endpoint (total likes, favourite blog, most blogs, most likes)
#         - most_likes implemented; empty lists report null instead of placeholder values
#         - Deterministic tie-breaks (first in creation order)
#         - PUT /api/blogs/{id} updates the author field again
#         - Comments endpoint responds with the updated blog
# 0.1.0 - Initial release
#         - Blog CRUD, comments, user registration, token login
