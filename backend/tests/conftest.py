"""Shared pytest setup — keeps every test database out of the working directory."""

import os
import tempfile
from pathlib import Path

# Must run before docsync.config is imported anywhere: the engines in
# docsync.infrastructure.database.session are built from these URLs.
_TEST_DATA_DIR = Path(tempfile.mkdtemp(prefix="docsync-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite:///{_TEST_DATA_DIR / 'local.db'}")
os.environ.setdefault("CENTRAL_DATABASE_URL", f"sqlite:///{_TEST_DATA_DIR / 'central.db'}")

import pytest_asyncio  # noqa: E402

from docsync.infrastructure.database import Base, CentralBase, build_engine, init_schema  # noqa: E402
from docsync.infrastructure.database.repositories import SQLAlchemyRecordStore  # noqa: E402


@pytest_asyncio.fixture
async def record_store(tmp_path):
    """A fresh SQLite-backed store per test."""
    engine = build_engine(f"sqlite:///{tmp_path / 'store.db'}")
    await init_schema(engine, Base)
    store = SQLAlchemyRecordStore(engine)
    yield store
    await store.close()


@pytest_asyncio.fixture
async def central_engine(tmp_path):
    """A fresh central ingest database per test."""
    engine = build_engine(f"sqlite:///{tmp_path / 'central.db'}")
    await init_schema(engine, CentralBase)
    yield engine
    await engine.dispose()
