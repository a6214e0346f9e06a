"""Pydantic DTOs (Data Transfer Objects) for the captured document feature."""

from typing import Any

from pydantic import BaseModel, Field

from docsync.domain.entities import SyncStatus


class AttachmentInput(BaseModel):
    """One already-encoded image, in display order."""

    data: str = Field(..., min_length=1, examples=["data:image/webp;base64,UklGR..."])
    mime_type: str | None = Field(None, max_length=100, examples=["image/webp"])


class DocumentCreate(BaseModel):
    """Schema for capturing a new document."""

    metadata: dict[str, Any] = Field(
        ..., examples=[{"name": "Rahim Uddin", "phone": "01711000000", "dob": "1990-04-12"}],
    )
    attachments: list[AttachmentInput] = Field(default_factory=list)


class DocumentUpdate(BaseModel):
    """Schema for editing a document — metadata and the full image set are replaced."""

    metadata: dict[str, Any]
    attachments: list[AttachmentInput] = Field(default_factory=list)


class DocumentResponse(BaseModel):
    """Master record returned to the client."""

    id: str
    metadata: dict[str, Any]
    created_at: int
    sync_status: SyncStatus

    model_config = {"from_attributes": True}


class DetailResponse(BaseModel):
    id: str
    master_id: str
    sequence: int
    mime_type: str
    data: str

    model_config = {"from_attributes": True}


class DocumentWithDetailsResponse(BaseModel):
    document: DocumentResponse
    details: list[DetailResponse]


class DocumentPageResponse(BaseModel):
    """One page of the newest-first document list."""

    items: list[DocumentResponse]
    total: int
    page: int
    page_size: int
    total_pages: int


class StatusCountsResponse(BaseModel):
    """Badge counts for the sync buttons."""

    pending: int
    failed: int


class CompressedImageResponse(BaseModel):
    data: str
    mime_type: str
    width: int
    height: int
    size_bytes: int

    model_config = {"from_attributes": True}
