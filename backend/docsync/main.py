"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docsync.config import get_settings
from docsync.infrastructure.database import Base, CentralBase, central_engine, engine, init_schema
from docsync.infrastructure.logging.log_config import setup_logging
from docsync.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and create both schemas."""
    setup_logging()

    await init_schema(engine, Base)
    logger.info("Local document store ready")

    try:
        await init_schema(central_engine, CentralBase)
    except Exception:
        logger.exception("Failed to prepare central ingest database — continuing without it")

    yield

    # Shutdown
    await engine.dispose()
    await central_engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "docsync.main:app",
        host="0.0.0.0",
        port=8030,
        reload=True,
    )
