"""SQLAlchemy database session and engine configuration."""

from collections.abc import AsyncGenerator
from pathlib import Path

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from docsync.config import get_settings


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine, preparing SQLite files and pragmas when needed."""
    async_url = _get_async_url(url)
    parsed = make_url(async_url)
    is_sqlite = parsed.get_backend_name() == "sqlite"

    if is_sqlite and parsed.database and parsed.database != ":memory:":
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

    new_engine = create_async_engine(async_url, echo=echo, future=True)
    if is_sqlite:
        event.listen(new_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


async def init_schema(target: AsyncEngine, base: type[DeclarativeBase]) -> None:
    """Create all tables registered on ``base`` if they do not exist."""
    async with target.begin() as conn:
        await conn.run_sync(base.metadata.create_all)


settings = get_settings()

engine = build_engine(settings.database_url)

central_engine = build_engine(settings.central_database_url)

central_session_factory = async_sessionmaker(
    central_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_central_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields a central DB session per request."""
    async with central_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
