"""
Static file serving from the storage root.
Any GET not claimed by the token routes lands here.
"""

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from token_registry.core.exceptions import FileNotFoundException
from token_registry.dependencies import Storage
from token_registry.schemas.error import ErrorResponse
from token_registry.storage.base import get_mime_type

router = APIRouter()


@router.get(
    "/{file_path:path}",
    response_class=StreamingResponse,
    responses={404: {"model": ErrorResponse}},
)
async def serve_file(file_path: str, storage: Storage):
    """
    Return the raw bytes of a stored file.

    Content type is inferred from the extension.
    """
    if not file_path or not await storage.exists(file_path):
        raise FileNotFoundException(file_path)

    size = await storage.get_size(file_path)

    return StreamingResponse(
        storage.download(file_path),
        media_type=get_mime_type(file_path),
        headers={"Content-Length": str(size)},
    )
