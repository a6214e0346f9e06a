"""HTTP sync endpoint client — implements the SyncEndpoint interface.

Posts one document per request to the central ingest API using httpx and
maps every non-success outcome to ``TransportFailureError``.
"""

import logging

import httpx

from docsync.application.interfaces import SyncEndpoint
from docsync.domain.entities import SyncAcknowledgement, SyncPayload
from docsync.domain.exceptions import TransportFailureError

logger = logging.getLogger(__name__)


class HttpSyncEndpoint(SyncEndpoint):
    """Infrastructure adapter — talks to ``POST /api/v1/documents/sync``."""

    def __init__(
        self,
        url: str,
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._url = url
        self._timeout = timeout
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def submit(self, payload: SyncPayload) -> SyncAcknowledgement:
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.post(
                    self._url,
                    headers={"Content-Type": "application/json"},
                    json=payload.to_wire(),
                )
            except httpx.HTTPError as exc:
                raise TransportFailureError(
                    f"Could not reach sync endpoint: {type(exc).__name__}: {exc}"
                ) from exc

            if not response.is_success:
                self._raise_endpoint_error(response)

            return self._parse_acknowledgement(response)

        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _raise_endpoint_error(response: httpx.Response) -> None:
        """Raise a TransportFailureError carrying the server's error body if present."""
        code = None
        message = f"Server error {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            code = body.get("code")
            message = body.get("message") or body.get("detail") or message
        raise TransportFailureError(str(message), status_code=response.status_code, code=code)

    @staticmethod
    def _parse_acknowledgement(response: httpx.Response) -> SyncAcknowledgement:
        try:
            body = response.json()
        except ValueError as exc:
            raise TransportFailureError(
                "Malformed sync response: body is not JSON",
                status_code=response.status_code,
            ) from exc

        if not isinstance(body, dict) or body.get("status") != "success":
            message = body.get("message") if isinstance(body, dict) else None
            code = body.get("code") if isinstance(body, dict) else None
            raise TransportFailureError(
                message or "Sync endpoint did not report success",
                status_code=response.status_code,
                code=code,
            )

        # oracleRecordId is what older central servers send
        remote_id = body.get("remoteRecordId", body.get("oracleRecordId"))
        if isinstance(remote_id, bool) or not isinstance(remote_id, int):
            raise TransportFailureError(
                f"Malformed sync response: remote record id {remote_id!r}",
                status_code=response.status_code,
            )

        return SyncAcknowledgement(
            remote_record_id=remote_id,
            message=str(body.get("message", "")),
            duplicate=bool(body.get("duplicate", False)),
        )
