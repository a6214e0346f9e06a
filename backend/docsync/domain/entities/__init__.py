from .sync_status import SyncStatus
from .document import DetailRecord, MasterRecord, RecordPage, now_millis
from .sync_result import (
    SyncAcknowledgement,
    SyncAttachment,
    SyncFailure,
    SyncPayload,
    SyncSummary,
)
from .image import CompressedImage

__all__ = [
    "SyncStatus",
    "DetailRecord",
    "MasterRecord",
    "RecordPage",
    "now_millis",
    "SyncAcknowledgement",
    "SyncAttachment",
    "SyncFailure",
    "SyncPayload",
    "SyncSummary",
    "CompressedImage",
]
