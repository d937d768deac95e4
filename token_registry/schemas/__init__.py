"""Pydantic schemas for request/response validation."""

from token_registry.schemas.error import ErrorResponse
from token_registry.schemas.token import TokenRecord

__all__ = [
    "ErrorResponse",
    "TokenRecord",
]
