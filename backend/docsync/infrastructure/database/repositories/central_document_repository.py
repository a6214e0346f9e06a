"""SQLAlchemy implementation of the CentralDocumentRepository."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from docsync.application.interfaces import CentralDocumentRepository
from docsync.domain.exceptions import DuplicateEntityError
from docsync.infrastructure.database.models import CentralDocumentModel, CentralImageModel


class SQLAlchemyCentralDocumentRepository(CentralDocumentRepository):
    """Concrete central document repository; the caller owns the transaction."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_id_by_transaction(self, transaction_id: str) -> int | None:
        result = await self._session.execute(
            select(CentralDocumentModel.id).where(
                CentralDocumentModel.frontend_uuid == transaction_id
            )
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        transaction_id: str,
        metadata: dict[str, Any],
        images: list[tuple[int, str, bytes]],
    ) -> int:
        document = CentralDocumentModel(
            frontend_uuid=transaction_id,
            full_name=metadata.get("fullName") or metadata.get("name"),
            date_of_birth=metadata.get("dateOfBirth") or metadata.get("dob"),
            phone=metadata.get("phoneNumber") or metadata.get("phone"),
            document_metadata=metadata,
            captured_at=metadata.get("capturedAt"),
        )
        self._session.add(document)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            raise DuplicateEntityError("Document", "transactionId", transaction_id) from exc

        self._session.add_all([
            CentralImageModel(
                master_id=document.id,
                sequence_no=sequence,
                mime_type=mime_type,
                image_data=content,
            )
            for sequence, mime_type, content in images
        ])
        await self._session.flush()
        return document.id
