from .record_store import SQLAlchemyRecordStore
from .central_document_repository import SQLAlchemyCentralDocumentRepository

__all__ = [
    "SQLAlchemyRecordStore",
    "SQLAlchemyCentralDocumentRepository",
]
