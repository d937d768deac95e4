"""
Token service - register-token and get-token.

Registration validates the id, writes the uploaded image under a random
name and stores the record. Re-registering an id replaces the record but
leaves the earlier image file on disk.
"""

import logging
import re
from uuid import uuid4

from fastapi import UploadFile

from token_registry.core.exceptions import (
    InternalException,
    InvalidArgumentException,
    TokenNotFoundException,
)
from token_registry.schemas.token import TokenRecord
from token_registry.services.token_store import TokenStore
from token_registry.storage.base import StorageBackend

logger = logging.getLogger(__name__)

_BASE10_INTEGER = re.compile(r"[+-]?[0-9]+")


def is_base10_integer(value: str) -> bool:
    """
    Check for a base-10 integer literal of any size.

    Accepts an optional sign and ASCII digits only; unlike ``int()`` this
    rejects whitespace, underscores and non-ASCII digits.
    """
    return _BASE10_INTEGER.fullmatch(value) is not None


def file_extension(filename: str | None) -> str:
    """
    Return the last dot-separated segment of ``filename``.

    Directory parts sent by the client are ignored.
    "photo.png" -> "png", "a.tar.gz" -> "gz", "blob" -> "", "x.png/sub" -> "".
    """
    if not filename:
        return ""
    base_name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    parts = base_name.split(".")
    if len(parts) > 1:
        return parts[-1]
    return ""


def random_file_name() -> str:
    """Random UUID in canonical text form."""
    try:
        return str(uuid4())
    except (OSError, NotImplementedError) as e:
        logger.error(f"Random file name generation failed: {e}")
        raise InternalException("failed to generate file name") from e


class TokenService:
    """Service class for token operations."""

    def __init__(self, store: TokenStore, storage: StorageBackend, images_dir: str = "images"):
        self.store = store
        self.storage = storage
        self.images_dir = images_dir.strip("/")

    async def get(self, token_id: str) -> TokenRecord:
        """
        Get token by id.

        Raises:
            InvalidArgumentException: If id is not a base-10 integer
            TokenNotFoundException: If no token is registered under id
        """
        if not is_base10_integer(token_id):
            raise InvalidArgumentException("failed to parse id")

        token = await self.store.get(token_id)
        if token is None:
            raise TokenNotFoundException(token_id)

        return token

    async def register(
        self,
        token_id: str,
        image: UploadFile | None,
        host: str,
        name: str = "",
        description: str = "",
        external_url: str = "",
        scheme: str = "https",
    ) -> TokenRecord:
        """
        Store the image and create (or overwrite) the token record.

        Args:
            token_id: Base-10 integer literal
            image: Uploaded image file
            host: Request host, used verbatim in the image URL
            name: Token name
            description: Token description
            external_url: External link
            scheme: URL scheme of the image URL

        Returns:
            The stored TokenRecord

        Raises:
            InvalidArgumentException: Bad id, missing or unreadable image
            InternalException: Random file name could not be generated
            StorageException: Image could not be written
        """
        if not is_base10_integer(token_id):
            raise InvalidArgumentException("failed to parse id")

        if image is None:
            raise InvalidArgumentException("missing file")

        try:
            await image.seek(0)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not open uploaded file {image.filename!r}: {e}")
            raise InvalidArgumentException("failed to open file") from e

        file_name = random_file_name()
        extension = file_extension(image.filename)
        if extension:
            file_name = f"{file_name}.{extension}"
        file_path = f"{self.images_dir}/{file_name}"

        await self.storage.upload(image, file_path)

        token = TokenRecord(
            id=token_id,
            name=name,
            description=description,
            external_url=external_url,
            image=f"{scheme}://{host}/{file_path}",
        )
        previous = await self.store.put(token)

        if previous is not None:
            logger.info(f"Token {token_id} overwritten; previous image {previous.image} left on disk")
        else:
            logger.info(f"Token {token_id} registered with image {file_path}")

        return token
