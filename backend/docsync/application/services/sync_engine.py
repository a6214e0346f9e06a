"""Sync engine — pushes locally captured documents to the central database."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from docsync.application.interfaces import RecordStore, SyncEndpoint
from docsync.domain.entities import (
    DetailRecord,
    MasterRecord,
    SyncAcknowledgement,
    SyncAttachment,
    SyncFailure,
    SyncPayload,
    SyncStatus,
    SyncSummary,
)
from docsync.domain.exceptions import TransportFailureError
from docsync.infrastructure.logging.colored_logger import SyncLogger, SyncStage

logger = logging.getLogger(__name__)
slog = SyncLogger("SyncEngine")

# Called before each record with (1-based position, batch size, record id)
ProgressCallback = Callable[[int, int, str], None]


def build_sync_payload(master: MasterRecord, details: list[DetailRecord]) -> SyncPayload:
    """Serialize a master and its details into the transmission payload.

    The master id is the transaction id. ``capturedAt`` is added to the
    metadata from the creation timestamp unless the caller already set it.
    """
    metadata: dict[str, Any] = dict(master.metadata)
    metadata.setdefault("capturedAt", master.created_at)
    ordered = sorted(details, key=lambda d: d.sequence)
    return SyncPayload(
        transaction_id=master.id,
        metadata=metadata,
        attachments=[
            SyncAttachment(sequence=d.sequence, mime_type=d.mime_type, data=d.data)
            for d in ordered
        ],
    )


class SyncEngine:
    """Drives batches of master records through the upload protocol.

    Records are processed strictly one after another. A failing record is
    marked ``failed`` and the batch moves on; only a failure to write a
    status back to the local store stops the batch.
    """

    def __init__(
        self,
        store: RecordStore,
        endpoint: SyncEndpoint,
        *,
        upload_timeout: float | None = 60.0,
        progress: ProgressCallback | None = None,
    ):
        self._store = store
        self._endpoint = endpoint
        self._upload_timeout = upload_timeout
        self._progress = progress

    async def sync_pending(self) -> SyncSummary:
        """Upload every record that has never been synced."""
        return await self.run_batch(await self._store.get_by_status(SyncStatus.PENDING))

    async def retry_failed(self) -> SyncSummary:
        """Resubmit every record whose last upload failed."""
        return await self.run_batch(await self._store.get_by_status(SyncStatus.FAILED))

    async def run_batch(self, records: list[MasterRecord]) -> SyncSummary:
        # synced is terminal: such records are never sent again
        records = [r for r in records if not r.sync_status.is_terminal]
        summary = SyncSummary(total=len(records))
        if not records:
            logger.info("Sync requested but there is nothing to do")
            return summary

        with slog.timed_batch(f"Sync batch of {len(records)}"):
            for index, record in enumerate(records, start=1):
                if self._progress is not None:
                    self._progress(index, len(records), record.id)

                try:
                    ack = await self._sync_one(record, index, len(records))
                except Exception as exc:
                    slog.step_error(SyncStage.FAILED, f"{record.id} not synced", error=exc)
                    record.mark_failed()
                    await self._store.set_status(record.id, record.sync_status)
                    summary.failed += 1
                    summary.errors.append(SyncFailure(record_id=record.id, message=str(exc)))
                    continue

                record.mark_synced()
                await self._store.set_status(record.id, record.sync_status)
                summary.succeeded += 1
                slog.step_complete(
                    SyncStage.SYNCED,
                    f"{record.id} synced",
                    remote_id=ack.remote_record_id,
                    duplicate=ack.duplicate,
                )

            slog.stats(succeeded=summary.succeeded, failed=summary.failed)

        logger.info(summary.message)
        return summary

    async def _sync_one(self, record: MasterRecord, index: int, total: int) -> SyncAcknowledgement:
        slog.step_start(SyncStage.READ, f"Reading {index}/{total}", record_id=record.id)
        details = await self._store.get_details(record.id)
        payload = build_sync_payload(record, details)

        slog.step_start(
            SyncStage.UPLOAD,
            f"Uploading {index}/{total}",
            attachments=len(payload.attachments),
        )
        try:
            return await asyncio.wait_for(
                self._endpoint.submit(payload), timeout=self._upload_timeout
            )
        except asyncio.TimeoutError as exc:
            raise TransportFailureError(
                f"Upload timed out after {self._upload_timeout}s"
            ) from exc
