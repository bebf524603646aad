class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class RecordNotFoundError(DomainError):
    """Raised when a work record id does not exist."""


class StorageError(Exception):
    """Raised when records cannot be read from or written to a store."""


class RemoteStorageError(StorageError):
    """Raised when the remote repository API returns an error."""

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class RemoteConflictError(RemoteStorageError):
    """Raised when a write is rejected because the version token is stale."""
