"""Domain entities for captured documents — a master header and its ordered images."""

import time
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from .sync_status import SyncStatus


def now_millis() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass
class MasterRecord:
    """Metadata header of one captured document.

    ``id`` is generated on the device and doubles as the idempotency key
    when the document is pushed to the central database.
    """

    metadata: dict[str, Any]
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: int = field(default_factory=now_millis)
    sync_status: SyncStatus = SyncStatus.PENDING

    def mark_synced(self) -> None:
        """Transition to synced after the remote side acknowledged the upload."""
        self.sync_status = self.sync_status.transition_to(SyncStatus.SYNCED)

    def mark_failed(self) -> None:
        """Transition to failed so the record is picked up by a retry batch."""
        self.sync_status = self.sync_status.transition_to(SyncStatus.FAILED)

    def update(self, metadata: dict[str, Any]) -> None:
        """Replace the mutable fields; id, created_at and status are kept."""
        self.metadata = metadata


@dataclass
class DetailRecord:
    """One encoded image belonging to a master record."""

    master_id: str
    sequence: int
    data: str  # base64 or data: URL
    mime_type: str
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass
class RecordPage:
    """A window of master records, newest first, plus the full record count."""

    records: list[MasterRecord]
    total: int
    page_number: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return -(-self.total // self.page_size)
