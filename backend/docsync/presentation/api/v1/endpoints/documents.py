"""Offline document capture, edit, list and wipe endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from docsync.application.schemas import (
    DetailResponse,
    DocumentCreate,
    DocumentPageResponse,
    DocumentResponse,
    DocumentUpdate,
    DocumentWithDetailsResponse,
    StatusCountsResponse,
)
from docsync.application.services import DocumentBrowser, DocumentService
from docsync.domain.exceptions import (
    EntityNotFoundError,
    StorageUnavailableError,
    TransactionAbortedError,
    ValidationFailureError,
    WipeBlockedError,
)
from docsync.infrastructure.dependencies import get_document_browser, get_document_service

router = APIRouter(prefix="/documents", tags=["Documents"])


def _storage_error(e: Exception) -> HTTPException:
    if isinstance(e, StorageUnavailableError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("", response_model=DocumentPageResponse)
async def list_documents(
    page: int = Query(1, ge=1, description="1-based page number"),
    browser: DocumentBrowser = Depends(get_document_browser),
) -> DocumentPageResponse:
    """Retrieve one page of documents, newest first."""
    try:
        result = await browser.load_page(page)
    except (StorageUnavailableError, TransactionAbortedError) as e:
        raise _storage_error(e)
    return DocumentPageResponse(
        items=[DocumentResponse.model_validate(r, from_attributes=True) for r in result.records],
        total=result.total,
        page=result.page_number,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.get("/counts", response_model=StatusCountsResponse)
async def status_counts(
    browser: DocumentBrowser = Depends(get_document_browser),
) -> StatusCountsResponse:
    """Pending and failed counts for the sync badges."""
    try:
        counts = await browser.badge_counts()
    except (StorageUnavailableError, TransactionAbortedError) as e:
        raise _storage_error(e)
    return StatusCountsResponse(**counts)


@router.get("/{document_id}", response_model=DocumentWithDetailsResponse)
async def get_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> DocumentWithDetailsResponse:
    """Retrieve a document with its images in sequence order."""
    try:
        master, details = await service.get_document(document_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return DocumentWithDetailsResponse(
        document=DocumentResponse.model_validate(master, from_attributes=True),
        details=[DetailResponse.model_validate(d, from_attributes=True) for d in details],
    )


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    data: DocumentCreate,
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """Capture a new document locally; it starts out pending."""
    try:
        master = await service.create_document(data)
    except ValidationFailureError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.errors)
    except (StorageUnavailableError, TransactionAbortedError) as e:
        raise _storage_error(e)
    return DocumentResponse.model_validate(master, from_attributes=True)


@router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: str,
    data: DocumentUpdate,
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    """Replace a document's metadata and its whole image set."""
    try:
        master = await service.update_document(document_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationFailureError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.errors)
    except (StorageUnavailableError, TransactionAbortedError) as e:
        raise _storage_error(e)
    return DocumentResponse.model_validate(master, from_attributes=True)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def wipe_documents(
    service: DocumentService = Depends(get_document_service),
) -> None:
    """Irreversibly delete every local document."""
    try:
        await service.wipe()
    except WipeBlockedError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except StorageUnavailableError as e:
        raise _storage_error(e)
