"""Unit tests for the DocumentBrowser pagination layer."""

import pytest

from docsync.application.services import DocumentBrowser
from docsync.domain.entities import SyncStatus
from tests.fakes import FakeRecordStore, make_document


@pytest.mark.asyncio
async def test_page_navigation_tracks_current_page():
    store = FakeRecordStore()
    for i in range(5):
        await store.save(*make_document(1000 + i))
    browser = DocumentBrowser(store, page_size=2)

    first = await browser.load_page(1)
    assert [m.created_at for m in first.records] == [1004, 1003]
    assert first.total_pages == 3

    second = await browser.next_page()
    assert browser.page == 2
    assert [m.created_at for m in second.records] == [1002, 1001]

    await browser.previous_page()
    await browser.previous_page()
    assert browser.page == 1


@pytest.mark.asyncio
async def test_refresh_reflects_new_records():
    store = FakeRecordStore()
    browser = DocumentBrowser(store, page_size=10)
    assert (await browser.refresh()).total == 0

    await store.save(*make_document(1))
    assert (await browser.refresh()).total == 1


@pytest.mark.asyncio
async def test_badge_counts_requery_the_store():
    store = FakeRecordStore()
    a, _ = make_document(1)
    await store.save(a, [])
    await store.save(*make_document(2, status=SyncStatus.FAILED))
    browser = DocumentBrowser(store)

    assert await browser.badge_counts() == {"pending": 1, "failed": 1}

    await store.set_status(a.id, SyncStatus.SYNCED)
    assert await browser.badge_counts() == {"pending": 0, "failed": 1}


def test_page_size_must_be_positive():
    with pytest.raises(ValueError):
        DocumentBrowser(FakeRecordStore(), page_size=0)
