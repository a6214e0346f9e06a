"""Application service (use case) for capturing and editing documents offline."""

import asyncio
import logging
import re

from docsync.application.interfaces import ImageCompressor, RecordStore
from docsync.application.schemas.document import (
    AttachmentInput,
    DocumentCreate,
    DocumentUpdate,
)
from docsync.domain.entities import (
    CompressedImage,
    DetailRecord,
    MasterRecord,
    SyncStatus,
)
from docsync.domain.exceptions import (
    EntityNotFoundError,
    ReadOnlyRecordError,
    ValidationFailureError,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "phone")
DEFAULT_MIME_TYPE = "image/png"

_DATA_URL_MIME = re.compile(r"^data:([^;,]+)[;,]")


def mime_type_of(data: str, declared: str | None = None) -> str:
    """Pick the content type of an encoded image.

    An explicit value wins, then the ``data:<mime>;`` prefix, then PNG.
    """
    if declared:
        return declared
    match = _DATA_URL_MIME.match(data)
    return match.group(1) if match else DEFAULT_MIME_TYPE


def build_details(master_id: str, attachments: list[AttachmentInput]) -> list[DetailRecord]:
    """Number attachments densely from 1 in the order they were given."""
    return [
        DetailRecord(
            master_id=master_id,
            sequence=position,
            data=attachment.data,
            mime_type=mime_type_of(attachment.data, attachment.mime_type),
        )
        for position, attachment in enumerate(attachments, start=1)
    ]


class DocumentService:
    """Orchestrates capture, edit and wipe. Depends on the store port (DI).

    Sync status is never taken from the caller: new documents start
    ``pending`` and edits keep whatever status the record already has.
    """

    def __init__(self, store: RecordStore, compressor: ImageCompressor | None = None):
        self._store = store
        self._compressor = compressor

    @staticmethod
    def validate(metadata: dict, attachments: list[AttachmentInput]) -> None:
        errors: list[str] = []
        for name in REQUIRED_FIELDS:
            value = metadata.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                errors.append(f"'{name}' is required")
        if not attachments:
            errors.append("At least one attachment is required")
        if errors:
            raise ValidationFailureError(errors)

    async def create_document(self, data: DocumentCreate) -> MasterRecord:
        self.validate(data.metadata, data.attachments)
        master = MasterRecord(metadata=data.metadata)
        details = build_details(master.id, data.attachments)
        await self._store.save(master, details)
        logger.info("Captured document %s with %d image(s)", master.id, len(details))
        return master

    async def update_document(self, master_id: str, data: DocumentUpdate) -> MasterRecord:
        master = await self._store.get_by_id(master_id)
        if master is None:
            raise EntityNotFoundError("Document", master_id)
        if master.sync_status == SyncStatus.SYNCED:
            raise ReadOnlyRecordError(master.id)

        self.validate(data.metadata, data.attachments)
        master.update(data.metadata)
        details = build_details(master.id, data.attachments)
        # the store re-checks the status inside its own transaction
        await self._store.update(master, details)
        logger.info("Edited document %s, now %d image(s)", master.id, len(details))
        return await self._store.get_by_id(master.id) or master

    async def get_document(self, master_id: str) -> tuple[MasterRecord, list[DetailRecord]]:
        master = await self._store.get_by_id(master_id)
        if master is None:
            raise EntityNotFoundError("Document", master_id)
        return master, await self._store.get_details(master_id)

    async def wipe(self) -> None:
        await self._store.wipe()

    async def compress_image(self, content: bytes) -> CompressedImage:
        """Compress raw camera bytes off the event loop."""
        if self._compressor is None:
            raise RuntimeError("No image compressor configured")
        return await asyncio.to_thread(self._compressor.compress, content)
