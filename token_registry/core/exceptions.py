"""
Custom exceptions for the token registry.

Every error is terminal for the request: handlers in ``token_registry.main``
turn these into ``{"error": ..., "message": ...}`` bodies with the carried
status code.
"""

from typing import Any


class TokenRegistryException(Exception):
    """Base exception for all token registry errors."""

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to response dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class InvalidArgumentException(TokenRegistryException):
    """400 - Malformed id, missing or unreadable image."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="invalid_argument",
            message=message,
            status_code=400,
            details=details,
        )


class TokenNotFoundException(TokenRegistryException):
    """404 - No token registered under the id."""

    def __init__(self, token_id: str):
        self.token_id = token_id
        super().__init__(
            error="not_found",
            message="not found",
            status_code=404,
        )


class FileNotFoundException(TokenRegistryException):
    """404 - Static path does not resolve to a stored file."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            error="not_found",
            message="not found",
            status_code=404,
        )


class StorageException(TokenRegistryException):
    """500 - Storage backend error (directory creation, disk write)."""

    def __init__(self, message: str = "failed to store file"):
        super().__init__(
            error="storage_error",
            message=message,
            status_code=500,
        )


class InternalException(TokenRegistryException):
    """500 - Unexpected failure that is not the caller's fault."""

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(
            error="internal_error",
            message=message,
            status_code=500,
        )
