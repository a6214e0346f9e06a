"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class StorageUnavailableError(Exception):
    """Raised when the local store cannot be opened or connected to."""


class TransactionAbortedError(Exception):
    """Raised when a multi-step local write failed partway and was rolled back."""


class WipeBlockedError(Exception):
    """Raised when the store cannot be destroyed because it is still in use."""


class ValidationFailureError(Exception):
    """Raised when captured input is rejected before any store write.

    Carries every problem found so the caller can show them all at once.
    """

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class InvalidStatusTransitionError(Exception):
    """Raised when a sync status change is not allowed by the lifecycle."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move sync status from '{current}' to '{target}'")


class TransportFailureError(Exception):
    """Raised when the sync endpoint is unreachable or answers with an error.

    ``status_code`` is ``None`` when no HTTP response was received at all
    (connection refused, DNS failure, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None, code: str | None = None):
        self.message = message
        self.status_code = status_code
        self.code = code
        prefix = f"{status_code}: " if status_code is not None else ""
        super().__init__(f"{prefix}{message}")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class ReadOnlyRecordError(ValidationFailureError):
    """Raised when an edit targets a record that has already been synced."""

    def __init__(self, record_id: str):
        self.record_id = record_id
        super().__init__([f"Document '{record_id}' is synced and can no longer be edited"])
