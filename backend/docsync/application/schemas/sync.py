"""Pydantic DTOs for the sync wire contract and batch results."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SyncAttachmentSchema(_WireModel):
    sequence: int = Field(..., ge=1)
    mime_type: str = Field(..., min_length=1)
    data: str = Field(..., min_length=1)


class SyncRequestSchema(_WireModel):
    """Body of ``POST /api/v1/documents/sync``."""

    transaction_id: str = Field(..., min_length=1, max_length=36)
    metadata: dict[str, Any]
    attachments: list[SyncAttachmentSchema]


class SyncSuccessSchema(_WireModel):
    status: str = "success"
    remote_record_id: int
    message: str
    duplicate: bool = False


class SyncErrorSchema(_WireModel):
    status: str = "error"
    code: str
    message: str


class SyncFailureResponse(BaseModel):
    record_id: str
    message: str

    model_config = {"from_attributes": True}


class SyncSummaryResponse(BaseModel):
    """Result of one sync or retry batch."""

    total: int
    succeeded: int
    failed: int
    message: str
    errors: list[SyncFailureResponse]
