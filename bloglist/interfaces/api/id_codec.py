"""Blog and user ids as they appear in URLs.

Stored ids are ArangoDB ``_id`` values ("blogs/12345"). A slash cannot sit in a
single path segment, so over HTTP the separator becomes a colon ("blogs:12345").
Route handlers decode path ids first thing and response types encode ids last;
services and persistence only ever see the stored form.
"""

from fastapi import HTTPException

MALFORMATTED_ID = "malformatted id"


class InvalidIdFormatError(ValueError):
    """An id that is not in the expected stored or URL form."""


def encode_id(arango_id: str) -> str:
    """Stored id to URL id: "blogs/1" -> "blogs:1".

    Raises:
        InvalidIdFormatError: If ``arango_id`` has no "/" or already contains ":"

    """
    collection, sep, key = arango_id.partition("/")
    if not sep or ":" in arango_id:
        raise InvalidIdFormatError(f"Not a stored document id: {arango_id!r}")
    return f"{collection}:{key}"


def decode_id(encoded_id: str, collection: str | None = None) -> str:
    """URL id to stored id: "blogs:1" -> "blogs/1".

    Args:
        encoded_id: Id taken from a URL
        collection: When given, the id must name a document in this collection

    Raises:
        InvalidIdFormatError: On a missing part, a stray separator or the wrong collection

    """
    prefix, sep, key = encoded_id.partition(":")
    if not sep or not prefix or not key or ":" in key or "/" in encoded_id:
        raise InvalidIdFormatError(f"Not a URL document id: {encoded_id!r}")
    if collection is not None and prefix != collection:
        raise InvalidIdFormatError(f"{encoded_id!r} is not a {collection} id")
    return f"{prefix}/{key}"


def decode_path_id(encoded_id: str, collection: str) -> str:
    """Decode a path parameter for a route handler.

        @router.get("/{blog_id}")
        async def get_blog(blog_id: str, ...):
            blog_id = decode_path_id(blog_id, "blogs")

    Raises:
        HTTPException: 400 "malformatted id"

    """
    try:
        return decode_id(encoded_id, collection)
    except InvalidIdFormatError:
        raise HTTPException(status_code=400, detail=MALFORMATTED_ID) from None
