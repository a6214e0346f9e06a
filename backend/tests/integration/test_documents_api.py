"""API tests for the local document endpoints, backed by a real SQLite store."""

import io

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from PIL import Image

from docsync.domain.exceptions import StorageUnavailableError
from docsync.infrastructure.dependencies import get_record_store
from docsync.main import app
from tests.fakes import FakeRecordStore


@pytest_asyncio.fixture
async def client(record_store):
    app.dependency_overrides[get_record_store] = lambda: record_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


def _capture(name: str = "Rahim Uddin", images: int = 1) -> dict:
    return {
        "metadata": {"name": name, "phone": "01711000000", "dob": "1990-04-12"},
        "attachments": [
            {"data": f"data:image/webp;base64,aW1n{i:04d}"} for i in range(images)
        ],
    }


@pytest.mark.asyncio
async def test_create_and_fetch_document(client):
    created = await client.post("/api/v1/documents", json=_capture(images=2))

    assert created.status_code == 201
    body = created.json()
    assert body["sync_status"] == "pending"

    fetched = await client.get(f"/api/v1/documents/{body['id']}")
    assert fetched.status_code == 200
    details = fetched.json()["details"]
    assert [d["sequence"] for d in details] == [1, 2]
    assert details[0]["mime_type"] == "image/webp"


@pytest.mark.asyncio
async def test_create_with_missing_fields_lists_every_error(client):
    response = await client.post(
        "/api/v1/documents", json={"metadata": {"name": ""}, "attachments": []}
    )

    assert response.status_code == 422
    assert len(response.json()["detail"]) == 3
    assert (await client.get("/api/v1/documents")).json()["total"] == 0


@pytest.mark.asyncio
async def test_list_pages_and_counts(client):
    for i in range(12):
        await client.post("/api/v1/documents", json=_capture(name=f"Person {i}"))

    first = (await client.get("/api/v1/documents")).json()
    second = (await client.get("/api/v1/documents", params={"page": 2})).json()
    counts = (await client.get("/api/v1/documents/counts")).json()

    assert first["total"] == 12
    assert first["total_pages"] == 2
    assert len(first["items"]) == 10
    assert len(second["items"]) == 2
    assert counts == {"pending": 12, "failed": 0}


@pytest.mark.asyncio
async def test_page_zero_is_rejected(client):
    response = await client.get("/api/v1/documents", params={"page": 0})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_replaces_images(client, record_store):
    doc_id = (await client.post("/api/v1/documents", json=_capture(images=3))).json()["id"]

    response = await client.put(f"/api/v1/documents/{doc_id}", json=_capture(name="Edited"))

    assert response.status_code == 200
    assert response.json()["metadata"]["name"] == "Edited"
    assert len(await record_store.get_details(doc_id)) == 1


@pytest.mark.asyncio
async def test_update_and_fetch_unknown_document(client):
    assert (await client.put("/api/v1/documents/nope", json=_capture())).status_code == 404
    assert (await client.get("/api/v1/documents/nope")).status_code == 404


@pytest.mark.asyncio
async def test_wipe_deletes_everything(client):
    await client.post("/api/v1/documents", json=_capture())

    response = await client.delete("/api/v1/documents")

    assert response.status_code == 204
    assert (await client.get("/api/v1/documents")).json()["total"] == 0


@pytest.mark.asyncio
async def test_compress_uploaded_photo(client):
    buffer = io.BytesIO()
    Image.new("RGB", (3000, 1000), color=(200, 200, 200)).save(buffer, format="JPEG")

    response = await client.post(
        "/api/v1/images/compress",
        files={"file": ("capture.jpg", buffer.getvalue(), "image/jpeg")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["width"] == 2560
    assert body["height"] in (853, 854)
    assert body["data"].startswith("data:image/webp;base64,")


@pytest.mark.asyncio
async def test_compress_rejects_non_images(client):
    response = await client.post(
        "/api/v1/images/compress",
        files={"file": ("notes.txt", b"hello", "text/plain")},
    )
    assert response.status_code == 422


class _UnavailableStore(FakeRecordStore):
    async def count_by_status(self, status):
        raise StorageUnavailableError("Local store could not be opened")


@pytest.mark.asyncio
async def test_counts_report_unavailable_store():
    app.dependency_overrides[get_record_store] = _UnavailableStore
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/v1/documents/counts")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 503
