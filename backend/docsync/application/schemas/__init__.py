from .document import (
    AttachmentInput,
    CompressedImageResponse,
    DetailResponse,
    DocumentCreate,
    DocumentPageResponse,
    DocumentResponse,
    DocumentUpdate,
    DocumentWithDetailsResponse,
    StatusCountsResponse,
)
from .sync import (
    SyncAttachmentSchema,
    SyncErrorSchema,
    SyncFailureResponse,
    SyncRequestSchema,
    SyncSuccessSchema,
    SyncSummaryResponse,
)

__all__ = [
    "AttachmentInput",
    "CompressedImageResponse",
    "DetailResponse",
    "DocumentCreate",
    "DocumentPageResponse",
    "DocumentResponse",
    "DocumentUpdate",
    "DocumentWithDetailsResponse",
    "StatusCountsResponse",
    "SyncAttachmentSchema",
    "SyncErrorSchema",
    "SyncFailureResponse",
    "SyncRequestSchema",
    "SyncSuccessSchema",
    "SyncSummaryResponse",
]
