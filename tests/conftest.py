"""
Pytest configuration and fixtures for token registry tests.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from token_registry.main import app
from token_registry.services.token_store import TokenStore, get_token_store
from token_registry.storage import LocalStorageBackend, get_storage


@pytest.fixture
def test_storage(tmp_path) -> LocalStorageBackend:
    """Create a test storage backend rooted in a temp directory."""
    return LocalStorageBackend(base_path=tmp_path / "storage")


@pytest.fixture
def token_store() -> TokenStore:
    """Fresh, empty token store."""
    return TokenStore()


@pytest_asyncio.fixture(scope="function")
async def client(test_storage, token_store) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    def override_get_storage():
        return test_storage

    def override_get_token_store():
        return token_store

    app.dependency_overrides[get_storage] = override_get_storage
    app.dependency_overrides[get_token_store] = override_get_token_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_token_data() -> dict[str, str]:
    """Sample token form fields."""
    return {
        "id": "42",
        "name": "Sunset #42",
        "description": "A sunset over the harbour",
        "external_url": "https://example.com/tokens/42",
    }


@pytest.fixture
def sample_image_content() -> bytes:
    """Sample image bytes for uploads."""
    return b"\x89PNG\r\n\x1a\nfake png payload for testing"
