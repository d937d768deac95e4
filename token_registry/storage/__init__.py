"""
Storage abstraction layer for the token registry.
Uploaded images live on the local filesystem under the storage root.
"""

from token_registry.storage.base import StorageBackend, get_mime_type
from token_registry.storage.local import LocalStorageBackend
from token_registry.storage.factory import get_storage_backend, get_storage

__all__ = [
    "StorageBackend",
    "LocalStorageBackend",
    "get_storage_backend",
    "get_storage",
    "get_mime_type",
]
