"""Core utilities and exceptions for the token registry."""

from token_registry.core.exceptions import (
    TokenRegistryException,
    InvalidArgumentException,
    TokenNotFoundException,
    FileNotFoundException,
    StorageException,
    InternalException,
)

__all__ = [
    "TokenRegistryException",
    "InvalidArgumentException",
    "TokenNotFoundException",
    "FileNotFoundException",
    "StorageException",
    "InternalException",
]
