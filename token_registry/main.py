"""
NFT Token Registry - Main Application Entry Point.

Serves token metadata from an in-memory map and token images from the
local storage root.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from token_registry import __version__
from token_registry.api.router import api_router
from token_registry.config import get_settings
from token_registry.core.exceptions import TokenRegistryException
from token_registry.core.responses import create_error_response, error_code_for_status
from token_registry.services.request_logging import RequestLoggingMiddleware
from token_registry.storage import get_storage_backend

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Creates the storage tree on startup.
    """
    # Startup
    logger.info(f"Starting {settings.PROJECT_NAME} on port {settings.PORT}")
    logger.info(f"Storage root: {settings.STORAGE_ROOT}")

    storage = get_storage_backend()
    await storage.ensure_directory(settings.IMAGES_DIR)

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## NFT Token Registry

Register NFT-style tokens with an image and fetch their metadata by id.

- `POST /` with a multipart form (`id`, `name`, `description`, `external_url`, `image`)
- `GET /{id}` for the stored metadata
- `GET /images/{name}` for the stored image

Records are kept in memory and are lost on restart.
    """,
    version=__version__,
    openapi_tags=[
        {"name": "tokens", "description": "Token registration and lookup"},
        {"name": "files", "description": "Static files from the storage root"},
    ],
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(TokenRegistryException)
async def token_registry_exception_handler(request: Request, exc: TokenRegistryException) -> JSONResponse:
    """Render registry exceptions as standardized error responses."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed form input is reported as 400, like every other bad argument."""
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    logger.debug(f"Request validation failed: {exc.errors()}")
    return create_error_response(
        error="invalid_argument",
        message="invalid request",
        status_code=400,
        details={"fields": fields} if fields else None,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes and wrong methods use the same error shape."""
    return create_error_response(
        error=error_code_for_status(exc.status_code),
        message=str(exc.detail).lower(),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error but returns a sanitized response.
    """
    logger.exception(f"Unexpected error: {exc}")
    return create_error_response(
        error="internal_error",
        message="An unexpected error occurred",
        status_code=500,
    )


app.include_router(api_router)


def run() -> None:
    """Console entry point: serve the app with uvicorn on HOST:PORT."""
    import uvicorn

    uvicorn.run(
        "token_registry.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
