"""
Pydantic schemas for error responses.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response format.

    Examples:
        400: {"error": "invalid_argument", "message": "failed to parse id"}
        404: {"error": "not_found", "message": "not found"}
        500: {"error": "storage_error", "message": "failed to store file"}
    """

    error: str = Field(
        ...,
        description="Error code string",
        examples=["invalid_argument", "not_found", "storage_error", "internal_error"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional additional error details",
    )
