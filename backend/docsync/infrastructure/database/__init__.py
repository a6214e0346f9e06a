from .base import Base, CentralBase
from .session import (
    engine,
    central_engine,
    central_session_factory,
    get_central_session,
    build_engine,
    init_schema,
)
from .models import MasterRecordModel, DetailRecordModel, CentralDocumentModel, CentralImageModel

__all__ = [
    "Base",
    "CentralBase",
    "engine",
    "central_engine",
    "central_session_factory",
    "get_central_session",
    "build_engine",
    "init_schema",
    "MasterRecordModel",
    "DetailRecordModel",
    "CentralDocumentModel",
    "CentralImageModel",
]
