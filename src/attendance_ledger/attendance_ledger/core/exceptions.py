from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations.

    ``kind`` is a stable machine-readable label the HTTP layer maps to a status
    code; the message (``str(err)``) is meant for humans.
    """

    kind = "domain_error"


class ValidationError(DomainError):
    """Raised when input data is missing, malformed or outside an enumeration."""

    kind = "invalid_input"


class NotFoundError(DomainError):
    """Raised when a looked-up entity does not exist."""

    kind = "not_found"


class PersonNotFoundError(NotFoundError):
    """Raised when an external id does not resolve to a roster entry."""

    kind = "person_not_found"

    def __init__(self, external_id: str | None = None, *, person_id: int | None = None):
        ref = f"external id {external_id!r}" if external_id is not None else f"id {person_id}"
        super().__init__(f"Person with {ref} not found")
        self.external_id = external_id
        self.person_id = person_id


class ConflictError(DomainError):
    """Raised when a write would violate a uniqueness constraint."""

    kind = "conflict"

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.field = field


class StorageUnavailableError(DomainError):
    """Raised when the backing store is unreachable or timed out. Callers may retry."""

    kind = "storage_unavailable"
