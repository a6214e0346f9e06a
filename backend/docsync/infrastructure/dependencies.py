"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from docsync.config import get_settings
from docsync.application.interfaces import ImageCompressor, RecordStore, SyncEndpoint
from docsync.application.services import (
    CentralIngestService,
    DocumentBrowser,
    DocumentService,
    SyncEngine,
)
from docsync.infrastructure.database.session import engine, get_central_session
from docsync.infrastructure.database.repositories import (
    SQLAlchemyCentralDocumentRepository,
    SQLAlchemyRecordStore,
)
from docsync.infrastructure.imaging import PillowImageCompressor
from docsync.infrastructure.logging.colored_logger import SyncLogger
from docsync.infrastructure.sync import HttpSyncEndpoint


@lru_cache
def get_record_store() -> RecordStore:
    """The device has exactly one local store for the life of the process."""
    return SQLAlchemyRecordStore(engine)


def get_sync_endpoint() -> SyncEndpoint:
    settings = get_settings()
    return HttpSyncEndpoint(
        url=settings.sync_endpoint_url,
        timeout=settings.sync_timeout_seconds,
    )


def get_image_compressor() -> ImageCompressor:
    settings = get_settings()
    return PillowImageCompressor(
        max_dimension=settings.image_max_dimension,
        quality=settings.image_quality,
        image_format=settings.image_format,
    )


async def get_document_service(
    store: RecordStore = Depends(get_record_store),
    compressor: ImageCompressor = Depends(get_image_compressor),
) -> AsyncGenerator[DocumentService, None]:
    """Provides a DocumentService bound to the local store."""
    yield DocumentService(store, compressor)


async def get_document_browser(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[DocumentBrowser, None]:
    yield DocumentBrowser(store, page_size=get_settings().page_size)


async def get_sync_engine(
    store: RecordStore = Depends(get_record_store),
    endpoint: SyncEndpoint = Depends(get_sync_endpoint),
) -> AsyncGenerator[SyncEngine, None]:
    """Provides a SyncEngine with the configured per-upload timeout and progress logging."""
    yield SyncEngine(
        store,
        endpoint,
        upload_timeout=get_settings().sync_timeout_seconds,
        progress=SyncLogger("SyncEngine").progress,
    )


async def get_central_ingest_service(
    session: AsyncSession = Depends(get_central_session),
) -> AsyncGenerator[CentralIngestService, None]:
    """Provides a CentralIngestService bound to a request-scoped central session."""
    yield CentralIngestService(SQLAlchemyCentralDocumentRepository(session))
