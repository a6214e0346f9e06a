"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from docsync.presentation.api.v1.endpoints.health import router as health_router
from docsync.presentation.api.v1.endpoints.central_sync import router as central_sync_router
from docsync.presentation.api.v1.endpoints.documents import router as documents_router
from docsync.presentation.api.v1.endpoints.sync import router as sync_router
from docsync.presentation.api.v1.endpoints.images import router as images_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(central_sync_router)
router.include_router(documents_router)
router.include_router(sync_router)
router.include_router(images_router)
