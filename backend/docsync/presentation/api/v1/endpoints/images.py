"""Image compression endpoint used by the capture screen."""

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from docsync.application.schemas import CompressedImageResponse
from docsync.application.services import DocumentService
from docsync.domain.exceptions import ValidationFailureError
from docsync.infrastructure.dependencies import get_document_service

router = APIRouter(prefix="/images", tags=["Images"])


@router.post("/compress", response_model=CompressedImageResponse)
async def compress_image(
    file: UploadFile,
    service: DocumentService = Depends(get_document_service),
) -> CompressedImageResponse:
    """Downscale and re-encode a captured photo into a transportable data URL."""
    content = await file.read()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Empty upload")
    try:
        image = await service.compress_image(content)
    except ValidationFailureError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=e.errors)
    return CompressedImageResponse.model_validate(image, from_attributes=True)
