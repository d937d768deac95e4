"""
Token endpoints.

GET /{token_id} returns a stored token; POST / registers one from a
multipart form carrying the metadata fields and an ``image`` file.
"""

from fastapi import APIRouter, File, Form, Request, UploadFile

from token_registry.dependencies import AppSettings, TokenServiceDep
from token_registry.schemas.error import ErrorResponse
from token_registry.schemas.token import TokenRecord

router = APIRouter()


@router.get(
    "/{token_id}",
    response_model=TokenRecord,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_token(token_id: str, service: TokenServiceDep) -> TokenRecord:
    """
    Get token metadata by id.

    The id must be a base-10 integer literal; any size is accepted.
    """
    return await service.get(token_id)


@router.post(
    "/",
    status_code=201,
    response_model=TokenRecord,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def register_token(
    request: Request,
    service: TokenServiceDep,
    settings: AppSettings,
    id: str = Form(default=""),
    name: str = Form(default=""),
    description: str = Form(default=""),
    external_url: str = Form(default=""),
    image: UploadFile | None = File(default=None, description="Token image"),
) -> TokenRecord:
    """
    Register a token, replacing any token with the same id.

    Accepts multipart/form-data with:
    - id: base-10 integer literal
    - name, description, external_url: free text, empty when absent
    - image: the image file, stored under a random name

    The image of a replaced token is not deleted.
    """
    host = request.headers.get("host") or request.url.netloc
    return await service.register(
        token_id=id,
        image=image,
        host=host,
        name=name,
        description=description,
        external_url=external_url,
        scheme=settings.PUBLIC_URL_SCHEME,
    )
