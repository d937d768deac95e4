"""
Local filesystem storage backend.
Stores token images under a configurable root directory.
"""

import logging
from pathlib import Path
from typing import AsyncGenerator

import aiofiles
import aiofiles.os
from fastapi import UploadFile

from token_registry.config import get_settings
from token_registry.core.exceptions import FileNotFoundException, StorageException
from token_registry.storage.base import StorageBackend

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024  # 1MB


class LocalStorageBackend(StorageBackend):
    """
    Local filesystem storage implementation.

    Files are stored under ``base_path``; every path handed in is resolved
    against it and rejected if it escapes the root.
    """

    def __init__(self, base_path: str | Path | None = None):
        """
        Initialize local storage backend.

        Args:
            base_path: Storage root. Defaults to settings.STORAGE_ROOT
        """
        self.base_path = Path(base_path or get_settings().STORAGE_ROOT).resolve()

    def _get_full_path(self, path: str) -> Path | None:
        """Map a storage path to the filesystem, or None if it leaves the root."""
        full_path = (self.base_path / path.lstrip("/")).resolve()
        if full_path != self.base_path and self.base_path not in full_path.parents:
            return None
        return full_path

    async def ensure_directory(self, path: str) -> None:
        """Create a directory under the root, including parents."""
        full_path = self._get_full_path(path)
        if full_path is None:
            raise StorageException("invalid storage path")

        try:
            await aiofiles.os.makedirs(full_path, exist_ok=True)
        except OSError as e:
            logger.error(f"Failed to create directory {full_path}: {e}")
            raise StorageException("failed to create storage directory") from e

    async def upload(self, file: UploadFile, path: str) -> str:
        """Upload a file from an UploadFile object."""
        full_path = self._get_full_path(path)
        if full_path is None:
            raise StorageException("invalid storage path")

        try:
            # Ensure parent directory exists
            await aiofiles.os.makedirs(full_path.parent, exist_ok=True)

            # Write file in chunks
            async with aiofiles.open(full_path, "wb") as f:
                while chunk := await file.read(CHUNK_SIZE):
                    await f.write(chunk)

            return path

        except OSError as e:
            logger.error(f"Failed to write {full_path}: {e}")
            raise StorageException() from e

    async def download(self, path: str) -> AsyncGenerator[bytes, None]:
        """Stream a file in chunks."""
        full_path = self._get_full_path(path)
        if full_path is None or not full_path.is_file():
            raise FileNotFoundException(path)

        async with aiofiles.open(full_path, "rb") as f:
            while chunk := await f.read(CHUNK_SIZE):
                yield chunk

    async def exists(self, path: str) -> bool:
        """Check if a regular file exists at path."""
        full_path = self._get_full_path(path)
        if full_path is None:
            return False
        return await aiofiles.os.path.isfile(full_path)

    async def get_size(self, path: str) -> int:
        """Get file size in bytes."""
        if not await self.exists(path):
            raise FileNotFoundException(path)

        stat = await aiofiles.os.stat(self._get_full_path(path))
        return stat.st_size
