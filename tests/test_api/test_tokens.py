"""
Tests for token endpoints.
"""

import io
import re

import httpx
import pytest
from httpx import AsyncClient

from token_registry.services.token_store import TokenStore
from token_registry.storage import LocalStorageBackend

UUID_PATTERN = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"


def _image(content: bytes, filename: str = "photo.png", content_type: str = "image/png"):
    return {"image": (filename, io.BytesIO(content), content_type)}


@pytest.mark.asyncio
async def test_register_token(
    client: AsyncClient,
    sample_token_data: dict,
    sample_image_content: bytes,
):
    """Test registering a new token."""
    response = await client.post(
        "/",
        data=sample_token_data,
        files=_image(sample_image_content),
    )

    assert response.status_code == 201
    result = response.json()
    assert result["id"] == "42"
    assert result["name"] == sample_token_data["name"]
    assert result["description"] == sample_token_data["description"]
    assert result["external_url"] == sample_token_data["external_url"]
    assert re.fullmatch(rf"https://test/images/{UUID_PATTERN}\.png", result["image"])


@pytest.mark.asyncio
async def test_register_then_get_round_trip(
    client: AsyncClient,
    sample_token_data: dict,
    sample_image_content: bytes,
):
    """Test that a registered token is returned verbatim and its image is served."""
    create_response = await client.post(
        "/",
        data=sample_token_data,
        files=_image(sample_image_content),
    )
    created = create_response.json()

    response = await client.get("/42")

    assert response.status_code == 200
    assert response.json() == created

    image_response = await client.get(httpx.URL(created["image"]).path)
    assert image_response.status_code == 200
    assert image_response.content == sample_image_content
    assert image_response.headers["content-type"] == "image/png"


@pytest.mark.asyncio
async def test_register_missing_fields_default_to_empty(
    client: AsyncClient,
    sample_image_content: bytes,
):
    """Test that absent metadata fields become empty strings."""
    response = await client.post(
        "/",
        data={"id": "7"},
        files=_image(sample_image_content),
    )

    assert response.status_code == 201
    result = response.json()
    assert result["name"] == ""
    assert result["description"] == ""
    assert result["external_url"] == ""


@pytest.mark.asyncio
async def test_register_overwrites_previous_token(
    client: AsyncClient,
    test_storage: LocalStorageBackend,
    sample_token_data: dict,
):
    """Test that re-registering an id keeps only the latest record."""
    first = await client.post(
        "/",
        data={**sample_token_data, "name": "first"},
        files=_image(b"first image"),
    )
    second = await client.post(
        "/",
        data={**sample_token_data, "name": "second"},
        files=_image(b"second image"),
    )
    assert first.status_code == 201
    assert second.status_code == 201

    response = await client.get("/42")
    data = response.json()
    assert data["name"] == "second"
    assert data["image"] == second.json()["image"]

    # The earlier image is orphaned but still stored
    first_path = httpx.URL(first.json()["image"]).path
    assert first_path != httpx.URL(data["image"]).path
    assert await test_storage.exists(first_path)


@pytest.mark.asyncio
async def test_register_without_image(
    client: AsyncClient,
    token_store: TokenStore,
    sample_token_data: dict,
):
    """Test that a form without an image is rejected and nothing is stored."""
    response = await client.post("/", data=sample_token_data)

    assert response.status_code == 400
    assert response.json() == {"error": "invalid_argument", "message": "missing file"}
    assert len(token_store) == 0

    get_response = await client.get("/42")
    assert get_response.status_code == 404


@pytest.mark.asyncio
async def test_register_image_sent_as_text(
    client: AsyncClient,
    token_store: TokenStore,
    sample_token_data: dict,
):
    """Test that an image field without file content is a bad request."""
    response = await client.post(
        "/",
        data={**sample_token_data, "image": "not-a-file"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "invalid_argument"
    assert len(token_store) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("token_id", ["", "abc", "1.5", "0x1f", "1_000", " 42", "4 2", "--1", "١٢"])
async def test_register_invalid_id(
    client: AsyncClient,
    token_store: TokenStore,
    sample_image_content: bytes,
    token_id: str,
):
    """Test that ids which are not base-10 integers are rejected before the upload."""
    response = await client.post(
        "/",
        data={"id": token_id, "name": "bad"},
        files=_image(sample_image_content),
    )

    assert response.status_code == 400
    assert response.json()["message"] == "failed to parse id"
    assert len(token_store) == 0


@pytest.mark.asyncio
async def test_register_invalid_id_checked_before_image(client: AsyncClient):
    """Test that the id is validated before the image is looked at."""
    response = await client.post("/", data={"id": "nope"})

    assert response.status_code == 400
    assert response.json()["message"] == "failed to parse id"


@pytest.mark.asyncio
async def test_register_large_id(
    client: AsyncClient,
    sample_image_content: bytes,
):
    """Test that ids beyond 64-bit range are accepted and kept verbatim."""
    big_id = "-" + "9" * 80
    response = await client.post(
        "/",
        data={"id": big_id},
        files=_image(sample_image_content),
    )
    assert response.status_code == 201

    get_response = await client.get(f"/{big_id}")
    assert get_response.status_code == 200
    assert get_response.json()["id"] == big_id


@pytest.mark.asyncio
async def test_ids_are_not_normalised(
    client: AsyncClient,
    sample_image_content: bytes,
):
    """Test that "007" and "7" are different tokens."""
    await client.post("/", data={"id": "007"}, files=_image(sample_image_content))

    assert (await client.get("/007")).status_code == 200
    assert (await client.get("/7")).status_code == 404


@pytest.mark.asyncio
async def test_image_without_extension(
    client: AsyncClient,
    sample_image_content: bytes,
):
    """Test that a file name without a dot yields an image URL without a suffix."""
    response = await client.post(
        "/",
        data={"id": "1"},
        files=_image(sample_image_content, filename="blob", content_type="application/octet-stream"),
    )

    assert response.status_code == 201
    image_url = response.json()["image"]
    assert re.fullmatch(rf"https://test/images/{UUID_PATTERN}", image_url)

    image_response = await client.get(httpx.URL(image_url).path)
    assert image_response.content == sample_image_content
    assert image_response.headers["content-type"] == "application/octet-stream"


@pytest.mark.asyncio
async def test_image_uses_last_extension(
    client: AsyncClient,
    sample_image_content: bytes,
):
    """Test that only the final dot-separated segment is kept."""
    response = await client.post(
        "/",
        data={"id": "2"},
        files=_image(sample_image_content, filename="archive.tar.gz", content_type="application/gzip"),
    )

    assert response.json()["image"].endswith(".gz")
    assert ".tar" not in response.json()["image"]


@pytest.mark.asyncio
async def test_empty_image_is_accepted(client: AsyncClient):
    """Test that a zero-byte file is stored like any other."""
    response = await client.post("/", data={"id": "3"}, files=_image(b""))

    assert response.status_code == 201
    image_response = await client.get(httpx.URL(response.json()["image"]).path)
    assert image_response.status_code == 200
    assert image_response.content == b""


@pytest.mark.asyncio
async def test_image_url_keeps_host_port(sample_image_content: bytes, client: AsyncClient):
    """Test that the Host header, port included, appears in the image URL."""
    response = await client.post(
        "/",
        data={"id": "5"},
        files=_image(sample_image_content),
        headers={"Host": "tokens.example.com:8443"},
    )

    assert response.json()["image"].startswith("https://tokens.example.com:8443/images/")


@pytest.mark.asyncio
async def test_get_token_not_found(client: AsyncClient):
    """Test that an unknown but valid id returns 404."""
    response = await client.get("/999999999999999999999999999")

    assert response.status_code == 404
    assert response.json() == {"error": "not_found", "message": "not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("token_id", ["abc", "1.5", "0x10", "1_000", "1e3"])
async def test_get_token_invalid_id(client: AsyncClient, token_id: str):
    """Test that non-integer ids are rejected with 400."""
    response = await client.get(f"/{token_id}")

    assert response.status_code == 400
    assert response.json() == {"error": "invalid_argument", "message": "failed to parse id"}


@pytest.mark.asyncio
@pytest.mark.parametrize("token_id", ["0", "-12", "+12", "000123"])
async def test_get_token_accepts_signed_and_padded_ids(client: AsyncClient, token_id: str):
    """Test that every base-10 literal passes validation (and is simply unknown)."""
    response = await client.get(f"/{token_id}")

    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "filename,suffix",
    [("x.png/sub/dir", ""), ("uploads/photo.png", ".png")],
)
async def test_image_filename_directories_are_ignored(
    client: AsyncClient,
    test_storage: LocalStorageBackend,
    sample_image_content: bytes,
    filename: str,
    suffix: str,
):
    """Test that path parts in the client file name never reach the storage path."""
    response = await client.post(
        "/",
        data={"id": "8"},
        files=_image(sample_image_content, filename=filename),
    )

    assert response.status_code == 201
    image_url = response.json()["image"]
    assert re.fullmatch(rf"https://test/images/{UUID_PATTERN}{re.escape(suffix)}", image_url)

    stored = test_storage.base_path / httpx.URL(image_url).path.lstrip("/")
    assert stored.parent == test_storage.base_path / "images"
    assert stored.read_bytes() == sample_image_content
    assert [p.name for p in (test_storage.base_path / "images").iterdir()] == [stored.name]
