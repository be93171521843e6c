"""
HTTP error mapping - Domain error messages to HTTP status codes.

Validation failures are always 400. Every other domain error gets its
status by substring match on the message, not by exception type. Rules
are checked in order and the first match wins, so "invalid credentials"
lands in the 400 bucket.
"""

import logging

from fastapi import HTTPException, status

from src.domain.exceptions import AuthError, InvalidRequest

logger = logging.getLogger(__name__)

STATUS_RULES: list[tuple[tuple[str, ...], int]] = [
    (("already exists",), status.HTTP_409_CONFLICT),
    (("invalid", "required", "criteria", "requirements"), status.HTTP_400_BAD_REQUEST),
    (("invalid credentials", "not found"), status.HTTP_401_UNAUTHORIZED),
    (("too many attempts",), status.HTTP_429_TOO_MANY_REQUESTS),
]


def status_for(message: str) -> int:
    """Return the HTTP status code for a domain error message."""
    for needles, status_code in STATUS_RULES:
        if any(needle in message for needle in needles):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(error: AuthError) -> HTTPException:
    """Convert a domain error into an HTTPException carrying its message."""
    message = str(error)
    if isinstance(error, InvalidRequest):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status_for(message)

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Request failed: %s", message)
    else:
        logger.info("Request rejected with %d: %s", status_code, message)
    return HTTPException(status_code=status_code, detail=message)
