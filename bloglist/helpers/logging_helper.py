"""
Process logging setup, and the split between what a 500 response says and
what the log records.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def sanitize_exception_message(e: Exception, safe_message: str = "An error occurred") -> str:
    """
    Log ``e`` with its traceback and return ``safe_message`` for the client.

    Args:
        e: The exception that ended the request
        safe_message: Text for the response body

    Example:
        >>> try:
        ...     raise KeyError("users/123 password_hash")
        ... except Exception as e:
        ...     return {"error": sanitize_exception_message(e, "internal error")}
    """
    logger.exception(f"[API] Request failed: {e}")
    return safe_message


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the whole process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
