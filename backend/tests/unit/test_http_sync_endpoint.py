"""Unit tests for the HttpSyncEndpoint adapter."""

import json

import httpx
import pytest

from docsync.domain.entities import SyncAttachment, SyncPayload
from docsync.domain.exceptions import TransportFailureError
from docsync.infrastructure.sync import HttpSyncEndpoint

URL = "http://central.test/api/v1/documents/sync"


# ── Helpers ──


def _payload() -> SyncPayload:
    return SyncPayload(
        transaction_id="7b6d9f0e-0000-4000-8000-000000000001",
        metadata={"name": "Rahim", "capturedAt": 1_700_000_000_000},
        attachments=[SyncAttachment(sequence=1, mime_type="image/webp", data="AAAA")],
    )


def _endpoint(handler) -> HttpSyncEndpoint:
    return HttpSyncEndpoint(
        url=URL,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


# ── Tests ──


@pytest.mark.asyncio
async def test_submit_posts_wire_payload_and_parses_success():
    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["body"] = json.loads(request.content)
        return httpx.Response(
            200, json={"status": "success", "remoteRecordId": 42, "message": "Data committed successfully"}
        )

    ack = await _endpoint(handler).submit(_payload())

    assert captured["url"] == URL
    assert captured["body"]["transactionId"] == "7b6d9f0e-0000-4000-8000-000000000001"
    assert captured["body"]["attachments"] == [{"sequence": 1, "mimeType": "image/webp", "data": "AAAA"}]
    assert ack.remote_record_id == 42
    assert ack.duplicate is False


@pytest.mark.asyncio
async def test_duplicate_acknowledgement_with_legacy_id_key():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"status": "success", "oracleRecordId": 7, "message": "Record already exists (Idempotent)", "duplicate": True}
        )

    ack = await _endpoint(handler).submit(_payload())

    assert ack.remote_record_id == 7
    assert ack.duplicate is True


@pytest.mark.asyncio
async def test_error_response_raises_with_code():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"status": "error", "code": "SYNC-FAIL", "message": "db down"})

    with pytest.raises(TransportFailureError) as exc_info:
        await _endpoint(handler).submit(_payload())

    assert exc_info.value.status_code == 500
    assert exc_info.value.code == "SYNC-FAIL"
    assert exc_info.value.message == "db down"


@pytest.mark.asyncio
async def test_non_json_error_body_still_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad Gateway")

    with pytest.raises(TransportFailureError) as exc_info:
        await _endpoint(handler).submit(_payload())

    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        {"status": "error", "code": "X", "message": "nope"},
        {"status": "success", "message": "no id"},
        {"status": "success", "remoteRecordId": "42"},
        ["not", "an", "object"],
    ],
)
async def test_malformed_success_responses_raise(body):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    with pytest.raises(TransportFailureError):
        await _endpoint(handler).submit(_payload())


@pytest.mark.asyncio
async def test_connection_error_is_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportFailureError) as exc_info:
        await _endpoint(handler).submit(_payload())

    assert exc_info.value.status_code is None
    assert "ConnectError" in exc_info.value.message
