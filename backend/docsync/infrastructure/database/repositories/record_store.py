"""Concrete RecordStore implementation backed by SQLAlchemy async sessions."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from docsync.application.interfaces import RecordStore
from docsync.domain.entities import DetailRecord, MasterRecord, RecordPage, SyncStatus
from docsync.domain.exceptions import (
    ReadOnlyRecordError,
    StorageUnavailableError,
    TransactionAbortedError,
    WipeBlockedError,
)
from docsync.infrastructure.database.base import Base
from docsync.infrastructure.database.models import DetailRecordModel, MasterRecordModel

logger = logging.getLogger(__name__)


class SQLAlchemyRecordStore(RecordStore):
    """Implements the RecordStore port on top of one long-lived async engine.

    Each public method acquires its own session, runs exactly one
    transaction, and releases the session on every exit path. Driver errors
    are translated into the domain taxonomy:

    * failing to obtain a connection -> ``StorageUnavailableError``
    * failing inside the transaction -> ``TransactionAbortedError``
      (the transaction is rolled back first)
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._open_sessions = 0

    @property
    def in_use(self) -> bool:
        return self._open_sessions > 0

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[AsyncSession]:
        """Yield a session inside a single transaction, committed on clean exit."""
        self._open_sessions += 1
        try:
            async with self._session_factory() as session:
                try:
                    async with session.begin():
                        try:
                            await session.connection()
                        except OperationalError as exc:
                            raise StorageUnavailableError(
                                f"Local store could not be opened: {exc}"
                            ) from exc
                        yield session
                except SQLAlchemyError as exc:
                    raise TransactionAbortedError(
                        f"Local transaction rolled back: {exc}"
                    ) from exc
        finally:
            self._open_sessions -= 1

    # ── Mapping ──────────────────────────────────────────────────────

    @staticmethod
    def _to_master(model: MasterRecordModel) -> MasterRecord:
        return MasterRecord(
            id=model.id,
            metadata=dict(model.record_metadata or {}),
            created_at=model.created_at,
            sync_status=SyncStatus(model.sync_status),
        )

    @staticmethod
    def _to_master_model(entity: MasterRecord) -> MasterRecordModel:
        return MasterRecordModel(
            id=entity.id,
            record_metadata=entity.metadata,
            created_at=entity.created_at,
            sync_status=entity.sync_status.value,
        )

    @staticmethod
    def _to_detail(model: DetailRecordModel) -> DetailRecord:
        return DetailRecord(
            id=model.id,
            master_id=model.master_id,
            sequence=model.sequence,
            data=model.data,
            mime_type=model.mime_type,
        )

    @staticmethod
    def _to_detail_model(entity: DetailRecord) -> DetailRecordModel:
        return DetailRecordModel(
            id=entity.id,
            master_id=entity.master_id,
            sequence=entity.sequence,
            data=entity.data,
            mime_type=entity.mime_type,
        )

    # ── Writes ───────────────────────────────────────────────────────

    async def save(self, master: MasterRecord, details: list[DetailRecord]) -> None:
        async with self._transaction() as session:
            session.add(self._to_master_model(master))
            await session.flush()
            session.add_all([self._to_detail_model(d) for d in details])
        logger.debug("Saved document %s with %d image(s)", master.id, len(details))

    async def update(self, master: MasterRecord, details: list[DetailRecord]) -> None:
        async with self._transaction() as session:
            result = await session.execute(
                update(MasterRecordModel)
                .where(
                    MasterRecordModel.id == master.id,
                    MasterRecordModel.sync_status != SyncStatus.SYNCED.value,
                )
                .values(record_metadata=master.metadata)
            )
            if result.rowcount == 0:
                exists = await session.scalar(
                    select(MasterRecordModel.id).where(MasterRecordModel.id == master.id)
                )
                if exists is not None:
                    raise ReadOnlyRecordError(master.id)
                session.add(self._to_master_model(master))
                await session.flush()

            try:
                stale_ids = await self._detail_ids(session, master.id)
            except SQLAlchemyError as exc:
                raise TransactionAbortedError(
                    f"Failed to fetch details of {master.id} for update"
                ) from exc

            if stale_ids:
                await session.execute(
                    delete(DetailRecordModel).where(DetailRecordModel.id.in_(stale_ids))
                )
            session.add_all([self._to_detail_model(d) for d in details])
        logger.debug(
            "Updated document %s: replaced %d image(s) with %d",
            master.id, len(stale_ids), len(details),
        )

    @staticmethod
    async def _detail_ids(session: AsyncSession, master_id: str) -> list[str]:
        result = await session.execute(
            select(DetailRecordModel.id).where(DetailRecordModel.master_id == master_id)
        )
        return list(result.scalars().all())

    async def set_status(self, master_id: str, status: SyncStatus) -> None:
        async with self._transaction() as session:
            await session.execute(
                update(MasterRecordModel)
                .where(MasterRecordModel.id == master_id)
                .values(sync_status=status.value)
            )

    async def wipe(self) -> None:
        if self.in_use:
            raise WipeBlockedError(
                f"Local store is still in use by {self._open_sessions} operation(s); "
                "close them before wiping"
            )
        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.drop_all)
                await conn.run_sync(Base.metadata.create_all)
        except OperationalError as exc:
            if "locked" in str(exc).lower():
                raise WipeBlockedError(
                    "Local store is locked by another connection; restart and retry"
                ) from exc
            raise StorageUnavailableError(f"Local store could not be wiped: {exc}") from exc
        await self._engine.dispose()
        logger.warning("Local store wiped — all documents destroyed")

    # ── Reads ────────────────────────────────────────────────────────

    async def get_page(self, page_number: int, page_size: int) -> RecordPage:
        if page_number < 1:
            raise ValueError(f"page_number must be >= 1, got {page_number}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        async with self._transaction() as session:
            total = await session.scalar(
                select(func.count()).select_from(MasterRecordModel)
            )
            result = await session.execute(
                select(MasterRecordModel)
                .order_by(MasterRecordModel.created_at.desc(), MasterRecordModel.id.desc())
                .offset((page_number - 1) * page_size)
                .limit(page_size)
            )
            records = [self._to_master(m) for m in result.scalars().all()]

        return RecordPage(
            records=records,
            total=total or 0,
            page_number=page_number,
            page_size=page_size,
        )

    async def get_details(self, master_id: str) -> list[DetailRecord]:
        async with self._transaction() as session:
            result = await session.execute(
                select(DetailRecordModel).where(DetailRecordModel.master_id == master_id)
            )
            details = [self._to_detail(m) for m in result.scalars().all()]
        # Row order is not guaranteed by the backend
        details.sort(key=lambda d: d.sequence)
        return details

    async def get_by_status(self, status: SyncStatus) -> list[MasterRecord]:
        async with self._transaction() as session:
            result = await session.execute(
                select(MasterRecordModel).where(MasterRecordModel.sync_status == status.value)
            )
            return [self._to_master(m) for m in result.scalars().all()]

    async def get_by_id(self, master_id: str) -> MasterRecord | None:
        async with self._transaction() as session:
            model = await session.get(MasterRecordModel, master_id)
            return self._to_master(model) if model else None

    async def count_by_status(self, status: SyncStatus) -> int:
        async with self._transaction() as session:
            total = await session.scalar(
                select(func.count())
                .select_from(MasterRecordModel)
                .where(MasterRecordModel.sync_status == status.value)
            )
        return total or 0

    async def close(self) -> None:
        """Release every pooled connection held by the engine."""
        await self._engine.dispose()
