"""Exception handling utilities for API routes.

Hub errors carry an ``ErrorCode``; routes translate them to HTTP responses
with the factories below so every endpoint reports failures the same way.
"""

import logging
from typing import Any, Dict

from fastapi import HTTPException

from ..errors import ErrorCode, HubError

logger = logging.getLogger(__name__)


# ============================================================================
# HTTP Error Factory Functions
# ============================================================================


def device_not_found(name: str) -> HTTPException:
    """Create a standardized 404 error for device not found.

    Args:
        name: Device name that was not found

    Returns:
        HTTPException with 404 status and formatted message
    """
    return HTTPException(status_code=404, detail=f"Device not found: {name}")


def invalid_request(message: str) -> HTTPException:
    """Create a standardized 422 error for an invalid request.

    Args:
        message: Detailed validation error message

    Returns:
        HTTPException with 422 status and formatted message
    """
    return HTTPException(status_code=422, detail=f"Invalid request: {message}")


def choice_rejected(error: Dict[str, Any]) -> HTTPException:
    """Create a 422 error from a failed menu choice's error payload."""
    return HTTPException(status_code=422, detail=error)


def hub_error_to_http(exc: HubError) -> HTTPException:
    """Map a hub error onto the matching HTTP error.

    DEVICE_NOT_FOUND becomes 404, store write failures 500 and everything
    else 422.
    """
    if exc.code is ErrorCode.DEVICE_NOT_FOUND:
        return device_not_found(exc.details.get("name", ""))
    if exc.code is ErrorCode.STORE_WRITE_ERROR:
        logger.error(f"Store error: {exc.message}")
        return HTTPException(status_code=500, detail=exc.to_dict())
    return HTTPException(status_code=422, detail=exc.to_dict())
