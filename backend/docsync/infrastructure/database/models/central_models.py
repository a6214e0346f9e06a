"""SQLAlchemy ORM models for the central ingest database."""

from datetime import datetime, timezone

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    JSON,
    LargeBinary,
    String,
)

from docsync.infrastructure.database.base import CentralBase


class CentralDocumentModel(CentralBase):
    """A document received from a field device."""

    __tablename__ = "doc_masters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    frontend_uuid = Column(String(36), nullable=False, unique=True, index=True)
    full_name = Column(String(255), nullable=True)
    date_of_birth = Column(String(10), nullable=True)  # YYYY-MM-DD
    phone = Column(String(50), nullable=True)
    document_metadata = Column("metadata", JSON, nullable=False, default=dict)
    captured_at = Column(BigInteger, nullable=True)  # ms since epoch, device clock
    received_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )


class CentralImageModel(CentralBase):
    """One decoded image of a received document."""

    __tablename__ = "doc_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    master_id = Column(
        Integer,
        ForeignKey("doc_masters.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sequence_no = Column(Integer, nullable=False)
    mime_type = Column(String(100), nullable=False)
    image_data = Column(LargeBinary, nullable=False)
