from .document_service import DocumentService
from .document_browser import DocumentBrowser
from .sync_engine import SyncEngine, build_sync_payload
from .central_ingest_service import CentralIngestService

__all__ = [
    "DocumentService",
    "DocumentBrowser",
    "SyncEngine",
    "build_sync_payload",
    "CentralIngestService",
]
