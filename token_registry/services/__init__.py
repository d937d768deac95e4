"""
Business logic services for the token registry.
Services handle core operations separate from API endpoints.
"""

from token_registry.services.token_service import (
    TokenService,
    file_extension,
    is_base10_integer,
)
from token_registry.services.token_store import TokenStore, get_token_store

__all__ = [
    "TokenService",
    "TokenStore",
    "get_token_store",
    "file_extension",
    "is_base10_integer",
]
