"""Sync lifecycle of a captured document."""

from enum import Enum

from docsync.domain.exceptions import InvalidStatusTransitionError


class SyncStatus(str, Enum):
    """Lifecycle states of a master record.

    ``pending`` is set at creation, ``failed`` is re-enterable and eligible
    for retry, ``synced`` is terminal.
    """

    PENDING = "pending"
    SYNCED = "synced"
    FAILED = "failed"

    def can_transition_to(self, target: "SyncStatus") -> bool:
        return target in _TRANSITIONS[self]

    def transition_to(self, target: "SyncStatus") -> "SyncStatus":
        """Return ``target`` if the move is allowed, otherwise raise."""
        if not self.can_transition_to(target):
            raise InvalidStatusTransitionError(self.value, target.value)
        return target

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]


# failed -> pending is never stored: a retry resubmits failed records through
# the same path as pending ones.
_TRANSITIONS: dict[SyncStatus, frozenset[SyncStatus]] = {
    SyncStatus.PENDING: frozenset({SyncStatus.SYNCED, SyncStatus.FAILED}),
    SyncStatus.FAILED: frozenset({SyncStatus.SYNCED, SyncStatus.FAILED}),
    SyncStatus.SYNCED: frozenset(),
}
