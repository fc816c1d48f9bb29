"""Translate kernel StoreResults into HTTP responses."""

from typing import Any

from fastapi import HTTPException, status

from newsroom.kernel.types import (
    INVALID_CREDENTIALS,
    NOT_FOUND,
    UNKNOWN_PAGE,
    VALIDATION_ERROR,
    StoreResult,
)

STATUS_BY_KIND = {
    VALIDATION_ERROR: 422,
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
    INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    UNKNOWN_PAGE: status.HTTP_404_NOT_FOUND,
}


def unwrap(result: StoreResult) -> Any:
    """
    Return the result's value, or raise the matching HTTPException.

    The error message is passed through as `detail` so the client can show
    it inline.

    Args:
        result: StoreResult from any kernel store

    Returns:
        result.value when the intent was applied
    """
    if result.ok:
        return result.value
    raise HTTPException(
        status_code=STATUS_BY_KIND.get(result.error.kind, status.HTTP_400_BAD_REQUEST),
        detail={"kind": result.error.kind, "message": result.error.message},
    )
