"""Domain-level exceptions.

Business rule violations are subclasses of DomainException. The engine
turns them into outcomes for the caller; only StorageError is allowed to
escape an engine call, so callers can tell a broken store apart from bad
input.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An input field is malformed or out of range."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class EntityNotFoundError(DomainException):
    """A requested inventory item does not exist."""


class ConflictError(DomainException):
    """An item with the same id is already in the catalog."""


class StorageError(Exception):
    """The persistence backend could not complete an operation."""
