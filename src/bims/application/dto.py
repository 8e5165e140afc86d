"""Data Transfer Objects — plain containers that cross layer boundaries.

Every engine call answers with an ``Outcome``. Callers branch on ``kind``
to tell a rejected input, a missing item, a duplicate id and an empty but
successful query apart; ``message`` is meant for the operator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from bims.domain.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from bims.domain.model.item import InventoryItem

T = TypeVar("T")


class OutcomeKind(Enum):
    OK = "ok"
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of one engine operation."""

    kind: OutcomeKind
    message: str
    data: T | None = None
    field: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.OK

    @classmethod
    def success(cls, message: str, data: T | None = None) -> Outcome[T]:
        return cls(OutcomeKind.OK, message, data)

    @classmethod
    def from_exception(cls, exc: DomainException) -> Outcome[T]:
        if isinstance(exc, ValidationError):
            return cls(OutcomeKind.VALIDATION_ERROR, str(exc), field=exc.field)
        if isinstance(exc, EntityNotFoundError):
            return cls(OutcomeKind.NOT_FOUND, str(exc))
        if isinstance(exc, ConflictError):
            return cls(OutcomeKind.CONFLICT, str(exc), field="id")
        raise TypeError(f"Unhandled domain exception: {type(exc).__name__}")


@dataclass(frozen=True)
class LoadWarning:
    """Input: one skipped line of a bulk load."""

    line_number: int
    reason: str

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.reason}"


@dataclass(frozen=True)
class LoadSummary:
    loaded: int
    warnings: list[LoadWarning] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateResult:
    """Output: the item after an update, and what the update did."""

    item: InventoryItem
    field: str
    changed: bool
    status_flipped: bool = False
