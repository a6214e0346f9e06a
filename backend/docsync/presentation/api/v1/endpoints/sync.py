"""Endpoints that trigger a sync batch against the central database."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from docsync.application.schemas import SyncFailureResponse, SyncSummaryResponse
from docsync.application.services import SyncEngine
from docsync.domain.entities import SyncSummary
from docsync.domain.exceptions import StorageUnavailableError, TransactionAbortedError
from docsync.infrastructure.dependencies import get_sync_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sync", tags=["Sync"])


def _summary_to_response(summary: SyncSummary) -> SyncSummaryResponse:
    return SyncSummaryResponse(
        total=summary.total,
        succeeded=summary.succeeded,
        failed=summary.failed,
        message=summary.message,
        errors=[SyncFailureResponse.model_validate(e, from_attributes=True) for e in summary.errors],
    )


@router.post("", response_model=SyncSummaryResponse)
async def sync_pending(
    engine: SyncEngine = Depends(get_sync_engine),
) -> SyncSummaryResponse:
    """Upload every pending document, one at a time."""
    try:
        summary = await engine.sync_pending()
    except (StorageUnavailableError, TransactionAbortedError) as e:
        logger.error("Sync batch aborted by local store error: %s", e)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return _summary_to_response(summary)


@router.post("/retry", response_model=SyncSummaryResponse)
async def retry_failed(
    engine: SyncEngine = Depends(get_sync_engine),
) -> SyncSummaryResponse:
    """Resubmit every document whose last upload failed."""
    try:
        summary = await engine.retry_failed()
    except (StorageUnavailableError, TransactionAbortedError) as e:
        logger.error("Retry batch aborted by local store error: %s", e)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return _summary_to_response(summary)
