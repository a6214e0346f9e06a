from .record_store import RecordStore
from .sync_endpoint import SyncEndpoint
from .image_compressor import ImageCompressor
from .central_document_repository import CentralDocumentRepository

__all__ = [
    "RecordStore",
    "SyncEndpoint",
    "ImageCompressor",
    "CentralDocumentRepository",
]
