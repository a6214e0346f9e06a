"""Abstract repository interface (port) for the local master/detail store."""

from abc import ABC, abstractmethod

from docsync.domain.entities import DetailRecord, MasterRecord, RecordPage, SyncStatus


class RecordStore(ABC):
    """Port for offline document persistence — implemented in the infrastructure layer.

    Every method is one transaction: it either applies completely or not at
    all, and it releases its connection before returning.
    """

    @abstractmethod
    async def save(self, master: MasterRecord, details: list[DetailRecord]) -> None:
        """Insert a new master and its details atomically."""
        ...

    @abstractmethod
    async def update(self, master: MasterRecord, details: list[DetailRecord]) -> None:
        """Replace a master's metadata and its whole detail set atomically.

        ``created_at`` and ``sync_status`` of an existing row are left as
        stored. An unknown master is inserted as given.

        Raises:
            ReadOnlyRecordError: The stored row is already synced.
        """
        ...

    @abstractmethod
    async def get_page(self, page_number: int, page_size: int) -> RecordPage:
        """Return masters newest first, skipping ``(page_number - 1) * page_size``."""
        ...

    @abstractmethod
    async def get_details(self, master_id: str) -> list[DetailRecord]:
        """Return all details of a master sorted ascending by sequence."""
        ...

    @abstractmethod
    async def get_by_status(self, status: SyncStatus) -> list[MasterRecord]:
        """Return all masters in the given sync status, unordered."""
        ...

    @abstractmethod
    async def set_status(self, master_id: str, status: SyncStatus) -> None:
        """Update one master's sync status. Unknown ids are ignored."""
        ...

    @abstractmethod
    async def wipe(self) -> None:
        """Irreversibly destroy all stored data."""
        ...

    @abstractmethod
    async def get_by_id(self, master_id: str) -> MasterRecord | None:
        """Retrieve a single master by id."""
        ...

    @abstractmethod
    async def count_by_status(self, status: SyncStatus) -> int:
        """Number of masters in the given sync status."""
        ...
