"""Paginated, newest-first view over the local store."""

from docsync.application.interfaces import RecordStore
from docsync.domain.entities import RecordPage, SyncStatus


class DocumentBrowser:
    """Translates page-change requests into store queries.

    The only state held here is the page currently displayed; records and
    counts are re-read from the store on every call.
    """

    def __init__(self, store: RecordStore, page_size: int = 10):
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")
        self._store = store
        self._page_size = page_size
        self.page = 1

    @property
    def page_size(self) -> int:
        return self._page_size

    async def load_page(self, page_number: int) -> RecordPage:
        result = await self._store.get_page(page_number, self._page_size)
        self.page = page_number
        return result

    async def refresh(self) -> RecordPage:
        return await self.load_page(self.page)

    async def next_page(self) -> RecordPage:
        return await self.load_page(self.page + 1)

    async def previous_page(self) -> RecordPage:
        return await self.load_page(max(1, self.page - 1))

    async def badge_counts(self) -> dict[str, int]:
        return {
            SyncStatus.PENDING.value: await self._store.count_by_status(SyncStatus.PENDING),
            SyncStatus.FAILED.value: await self._store.count_by_status(SyncStatus.FAILED),
        }
