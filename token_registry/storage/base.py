"""
Abstract storage backend interface.
Defines the contract the token service and the static file route rely on.
"""

import mimetypes
from abc import ABC, abstractmethod
from typing import AsyncGenerator

from fastapi import UploadFile


class StorageBackend(ABC):
    """
    Abstract base class for storage backends.

    Paths are relative to the backend's root, using forward slashes
    (e.g. "images/<uuid>.png"), and double as the public URL path.
    """

    @abstractmethod
    async def ensure_directory(self, path: str) -> None:
        """
        Create a directory (and parents) under the root if absent.

        Raises:
            StorageException: If the directory cannot be created
        """
        pass

    @abstractmethod
    async def upload(self, file: UploadFile, path: str) -> str:
        """
        Write an uploaded file to storage byte for byte.

        Args:
            file: FastAPI UploadFile object, positioned at the start
            path: Destination path in storage

        Returns:
            The storage path where the file was saved

        Raises:
            StorageException: If the write fails
        """
        pass

    @abstractmethod
    async def download(self, path: str) -> AsyncGenerator[bytes, None]:
        """
        Stream a file from storage.

        Yields:
            File content in chunks

        Raises:
            FileNotFoundException: If the path is not a stored file
        """
        pass

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check whether ``path`` names a regular file inside the root."""
        pass

    @abstractmethod
    async def get_size(self, path: str) -> int:
        """
        Get the size of a stored file in bytes.

        Raises:
            FileNotFoundException: If the path is not a stored file
        """
        pass


def get_mime_type(path: str) -> str:
    """Infer a MIME type from the file extension."""
    mime_type, _ = mimetypes.guess_type(path)
    return mime_type or "application/octet-stream"
