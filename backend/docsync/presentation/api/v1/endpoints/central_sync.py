"""Central ingest endpoint — the receiving side of the device sync contract.

Every answer uses the wire envelope ``{"status": "success" | "error", ...}``
so devices can parse failures the same way as successes.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from docsync.application.schemas import SyncErrorSchema, SyncRequestSchema, SyncSuccessSchema
from docsync.application.services import CentralIngestService
from docsync.domain.exceptions import ValidationFailureError
from docsync.infrastructure.database.session import get_central_session
from docsync.infrastructure.dependencies import get_central_ingest_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["Central Sync"])


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    body = SyncErrorSchema(code=code, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


@router.post("/sync", response_model=SyncSuccessSchema)
async def ingest_document(
    payload: dict[str, Any] = Body(...),
    service: CentralIngestService = Depends(get_central_ingest_service),
    session: AsyncSession = Depends(get_central_session),
) -> JSONResponse:
    """Store one device document, keyed on its transaction id."""
    try:
        request = SyncRequestSchema.model_validate(payload)
    except ValidationError as e:
        return _error(status.HTTP_400_BAD_REQUEST, "INVALID_PAYLOAD", f"Invalid payload structure: {e.error_count()} error(s)")

    try:
        ack = await service.ingest(request)
        # acknowledge only what is durably stored
        await session.commit()
    except ValidationFailureError as e:
        await session.rollback()
        return _error(status.HTTP_400_BAD_REQUEST, "INVALID_ATTACHMENT", str(e))
    except Exception as e:
        await session.rollback()
        logger.exception("Sync ingest failed for %s", request.transaction_id)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "SYNC-FAIL", str(e))

    body = SyncSuccessSchema(
        remote_record_id=ack.remote_record_id,
        message=ack.message,
        duplicate=ack.duplicate,
    )
    return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump(by_alias=True))
