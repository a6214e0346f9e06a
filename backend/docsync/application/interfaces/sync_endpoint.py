"""Abstract interface for the remote sync endpoint."""

from abc import ABC, abstractmethod

from docsync.domain.entities import SyncAcknowledgement, SyncPayload


class SyncEndpoint(ABC):
    """Port for pushing one document to the central database.

    The endpoint keys on ``payload.transaction_id``: submitting the same id
    twice must return the existing remote record rather than a new one.
    """

    @abstractmethod
    async def submit(self, payload: SyncPayload) -> SyncAcknowledgement:
        """Upload one document.

        Raises:
            TransportFailureError: The endpoint could not be reached or
                answered with anything other than a success response.
        """
        ...
