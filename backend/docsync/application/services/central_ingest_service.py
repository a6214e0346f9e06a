"""Central side of the sync contract — idempotent ingest of field documents."""

import base64
import binascii
import logging
import re

from docsync.application.interfaces import CentralDocumentRepository
from docsync.application.schemas.sync import SyncRequestSchema
from docsync.domain.entities import SyncAcknowledgement
from docsync.domain.exceptions import DuplicateEntityError, ValidationFailureError

logger = logging.getLogger(__name__)

_DATA_URL = re.compile(r"^data:([A-Za-z0-9.+/-]+);base64,(.+)$", re.DOTALL)


def decode_attachment(data: str) -> bytes:
    """Decode a base64 string, with or without a ``data:<mime>;base64,`` prefix."""
    match = _DATA_URL.match(data)
    encoded = match.group(2) if match else data
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationFailureError([f"Attachment is not valid base64: {exc}"]) from exc


class CentralIngestService:
    """Stores each transaction id at most once.

    A repeated transaction id is answered with the remote id stored the
    first time, so a device retrying after an ambiguous failure never
    creates a second copy.
    """

    def __init__(self, repository: CentralDocumentRepository):
        self._repository = repository

    async def ingest(self, request: SyncRequestSchema) -> SyncAcknowledgement:
        existing_id = await self._repository.find_id_by_transaction(request.transaction_id)
        if existing_id is not None:
            logger.info("Duplicate sync for %s -> %d", request.transaction_id, existing_id)
            return self._duplicate(existing_id)

        images = [
            (a.sequence, a.mime_type, decode_attachment(a.data))
            for a in sorted(request.attachments, key=lambda a: a.sequence)
        ]

        try:
            remote_id = await self._repository.create(
                request.transaction_id, request.metadata, images
            )
        except DuplicateEntityError:
            # Lost a race with a concurrent submission of the same id
            existing_id = await self._repository.find_id_by_transaction(request.transaction_id)
            if existing_id is None:
                raise
            return self._duplicate(existing_id)

        logger.info(
            "Stored %s as remote document %d with %d image(s)",
            request.transaction_id, remote_id, len(images),
        )
        return SyncAcknowledgement(
            remote_record_id=remote_id,
            message="Data committed successfully",
        )

    @staticmethod
    def _duplicate(remote_id: int) -> SyncAcknowledgement:
        return SyncAcknowledgement(
            remote_record_id=remote_id,
            message="Record already exists (Idempotent)",
            duplicate=True,
        )
