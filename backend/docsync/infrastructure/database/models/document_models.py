"""SQLAlchemy ORM models for the offline document store."""

from typing import Any

from sqlalchemy import BigInteger, ForeignKey, Index, Integer, JSON, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from docsync.infrastructure.database.base import Base


class MasterRecordModel(Base):
    """ORM model — maps to the 'document_masters' table."""

    __tablename__ = "document_masters"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    # "metadata" is reserved on declarative classes
    record_metadata: Mapped[dict[str, Any]] = mapped_column(
        "metadata", JSON, nullable=False, default=dict
    )
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    sync_status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")

    __table_args__ = (
        Index("ix_document_masters_sync_status", "sync_status"),
        Index("ix_document_masters_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<MasterRecordModel(id={self.id}, status='{self.sync_status}')>"


class DetailRecordModel(Base):
    """ORM model — maps to the 'document_details' table."""

    __tablename__ = "document_details"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    master_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("document_masters.id", ondelete="CASCADE"),
        nullable=False,
    )
    sequence: Mapped[int] = mapped_column(Integer, nullable=False)
    mime_type: Mapped[str] = mapped_column(String(100), nullable=False)
    data: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (
        Index("ix_document_details_master", "master_id"),
        UniqueConstraint("master_id", "sequence", name="uq_document_details_sequence"),
    )

    def __repr__(self) -> str:
        return (
            f"<DetailRecordModel(id={self.id}, master={self.master_id}, "
            f"seq={self.sequence})>"
        )
