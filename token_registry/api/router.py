"""
Root router - aggregates all endpoints.

Order matters: the static file route is a catch-all and must come last.
"""

from fastapi import APIRouter

from token_registry.api import files, tokens

api_router = APIRouter()

api_router.include_router(tokens.router, tags=["tokens"])
api_router.include_router(files.router, tags=["files"])
