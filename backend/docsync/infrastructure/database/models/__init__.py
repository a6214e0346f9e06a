from .document_models import MasterRecordModel, DetailRecordModel
from .central_models import CentralDocumentModel, CentralImageModel

__all__ = [
    "MasterRecordModel",
    "DetailRecordModel",
    "CentralDocumentModel",
    "CentralImageModel",
]
