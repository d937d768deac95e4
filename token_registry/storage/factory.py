"""
Storage backend factory.
Builds the backend from the configured storage root.
"""

from functools import lru_cache

from token_registry.config import get_settings
from token_registry.storage.base import StorageBackend
from token_registry.storage.local import LocalStorageBackend


@lru_cache
def get_storage_backend() -> StorageBackend:
    """
    Get the configured storage backend.

    Uses LRU cache to ensure only one instance is created.
    """
    return LocalStorageBackend(base_path=get_settings().STORAGE_ROOT)


def get_storage() -> StorageBackend:
    """
    Dependency function for FastAPI.

    Usage:
        @router.post("/")
        async def upload(storage: StorageBackend = Depends(get_storage)):
            ...
    """
    return get_storage_backend()
