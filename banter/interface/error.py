"""Interface layer errors.

Maps domain failures onto HTTP responses.
"""

import logfire
from fastapi import HTTPException, status

from banter.domain.error import (
    ContentDeletedException,
    NotFoundError,
    StorageWriteError,
)


def to_http_exception(error: Exception) -> HTTPException:
    """Translate a domain or validation error into an HTTP error.

    - NotFoundError -> 404
    - ContentDeletedException -> 409
    - StorageWriteError -> 507 (the mutation was rolled back; retry later)
    - Anything else (validation) -> 400

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ContentDeletedException):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, StorageWriteError):
        logfire.error(
            "Storage write failed",
            topic_key=error.topic_key,
            collection=error.collection,
        )
        return HTTPException(
            status_code=status.HTTP_507_INSUFFICIENT_STORAGE,
            detail="Storage is full; the change was not saved",
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
