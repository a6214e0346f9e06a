"""Unit tests for the sync status lifecycle."""

import pytest

from docsync.domain.entities import MasterRecord, SyncStatus
from docsync.domain.exceptions import InvalidStatusTransitionError


def test_new_record_starts_pending():
    record = MasterRecord(metadata={"name": "A"})
    assert record.sync_status == SyncStatus.PENDING


@pytest.mark.parametrize(
    "current, target",
    [
        (SyncStatus.PENDING, SyncStatus.SYNCED),
        (SyncStatus.PENDING, SyncStatus.FAILED),
        (SyncStatus.FAILED, SyncStatus.FAILED),
        (SyncStatus.FAILED, SyncStatus.SYNCED),
    ],
)
def test_allowed_transitions(current: SyncStatus, target: SyncStatus):
    assert current.transition_to(target) == target


@pytest.mark.parametrize("target", list(SyncStatus))
def test_synced_is_terminal(target: SyncStatus):
    assert SyncStatus.SYNCED.is_terminal
    with pytest.raises(InvalidStatusTransitionError):
        SyncStatus.SYNCED.transition_to(target)


def test_failed_record_can_fail_again_then_sync():
    record = MasterRecord(metadata={})
    record.mark_failed()
    record.mark_failed()
    assert record.sync_status == SyncStatus.FAILED
    record.mark_synced()
    assert record.sync_status == SyncStatus.SYNCED


def test_mark_failed_after_synced_raises():
    record = MasterRecord(metadata={})
    record.mark_synced()
    with pytest.raises(InvalidStatusTransitionError) as exc_info:
        record.mark_failed()
    assert exc_info.value.current == "synced"
    assert exc_info.value.target == "failed"
