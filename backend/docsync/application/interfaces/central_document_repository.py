"""Abstract repository interface (port) for documents received by the central database."""

from abc import ABC, abstractmethod
from typing import Any


class CentralDocumentRepository(ABC):
    """Port for central document persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def find_id_by_transaction(self, transaction_id: str) -> int | None:
        """Return the remote record id already stored for a transaction id."""
        ...

    @abstractmethod
    async def create(
        self,
        transaction_id: str,
        metadata: dict[str, Any],
        images: list[tuple[int, str, bytes]],
    ) -> int:
        """Insert a document and its ``(sequence, mime_type, content)`` images.

        Returns the new remote record id.

        Raises:
            DuplicateEntityError: Another request stored the same
                transaction id first.
        """
        ...
