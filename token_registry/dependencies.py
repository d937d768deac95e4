"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

from typing import Annotated

from fastapi import Depends

from token_registry.config import Settings, get_settings
from token_registry.services.token_service import TokenService
from token_registry.services.token_store import TokenStore, get_token_store
from token_registry.storage import StorageBackend, get_storage


# Type aliases for cleaner endpoint signatures
Storage = Annotated[StorageBackend, Depends(get_storage)]
Tokens = Annotated[TokenStore, Depends(get_token_store)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_token_service(store: Tokens, storage: Storage, settings: AppSettings) -> TokenService:
    """Build a TokenService over the shared store and storage backend."""
    return TokenService(store, storage, images_dir=settings.IMAGES_DIR)


TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
