"""Value objects describing the outcome of sync calls and batches."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SyncAttachment:
    """One image as it travels over the wire."""

    sequence: int
    mime_type: str
    data: str


@dataclass
class SyncPayload:
    """Transmission payload for one master record."""

    transaction_id: str
    metadata: dict[str, Any]
    attachments: list[SyncAttachment]

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON body expected by the sync endpoint."""
        return {
            "transactionId": self.transaction_id,
            "metadata": self.metadata,
            "attachments": [
                {"sequence": a.sequence, "mimeType": a.mime_type, "data": a.data}
                for a in self.attachments
            ],
        }


@dataclass
class SyncAcknowledgement:
    """Successful answer from the sync endpoint.

    ``duplicate`` is True when the remote side already held the
    transaction id and returned the existing record instead of inserting.
    """

    remote_record_id: int
    message: str = ""
    duplicate: bool = False


@dataclass
class SyncFailure:
    """Why one record of a batch could not be synced."""

    record_id: str
    message: str


@dataclass
class SyncSummary:
    """Aggregate result of one batch run."""

    total: int = 0
    succeeded: int = 0
    failed: int = 0
    errors: list[SyncFailure] = field(default_factory=list)

    @property
    def nothing_to_do(self) -> bool:
        return self.total == 0

    @property
    def message(self) -> str:
        """Single user-facing line for the whole batch."""
        if self.nothing_to_do:
            return "No documents to sync."
        msg = f"Batch completed. Success: {self.succeeded}"
        if self.failed:
            msg += f", Failed: {self.failed}"
        return msg
