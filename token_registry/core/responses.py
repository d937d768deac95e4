"""
Response utilities for the token registry.
Provides standardized error response formatting.
"""

from http import HTTPStatus
from typing import Any

from fastapi.responses import JSONResponse


def error_code_for_status(status_code: int) -> str:
    """
    Derive a snake_case error code from an HTTP status.

    404 -> "not_found", 405 -> "method_not_allowed".
    """
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        return "http_error"
    return phrase.lower().replace(" ", "_").replace("-", "_")


def create_error_response(
    error: str,
    message: str,
    status_code: int,
    details: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        error: Error code string
        message: Human-readable error message
        status_code: HTTP status code
        details: Optional additional error details
        headers: Optional response headers (e.g. Allow on 405)

    Returns:
        JSONResponse with error payload
    """
    content = {
        "error": error,
        "message": message,
    }
    if details:
        content["details"] = details

    return JSONResponse(status_code=status_code, content=content, headers=headers)
