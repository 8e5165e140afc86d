"""Field validators for untrusted text input.

Each validator turns raw text into a typed value and reports the outcome
as a ``Validated`` result instead of raising, so a valid zero can never be
mistaken for a rejected value.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Generic, TypeVar

from bims.domain.exceptions import ValidationError
from bims.domain.model.item import StockStatus

T = TypeVar("T")

_INTEGER = re.compile(r"[+-]?[0-9]+")

MAX_INT = 2**31 - 1


@dataclass(frozen=True)
class Validated(Generic[T]):
    """Tagged result of validating one field."""

    field: str
    value: T | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    @classmethod
    def success(cls, field: str, value: T) -> Validated[T]:
        return cls(field=field, value=value)

    @classmethod
    def failure(cls, field: str, reason: str) -> Validated[T]:
        return cls(field=field, reason=reason)

    def unwrap(self) -> T:
        """Return the value, or raise ValidationError for a failed result."""
        if not self.ok:
            raise ValidationError(self.reason, field=self.field)
        return self.value


def _required_text(field: str, label: str, raw: str | None) -> Validated[str]:
    if raw is None or not raw.strip():
        return Validated.failure(field, f"{label} cannot be empty")
    return Validated.success(field, raw.strip())


def validate_id(raw: str | None) -> Validated[str]:
    return _required_text("id", "ID", raw)


def validate_description(raw: str | None) -> Validated[str]:
    return _required_text("description", "Description", raw)


def _non_negative_int(field: str, label: str, raw: str | None) -> Validated[int]:
    text = (raw or "").strip()
    if not _INTEGER.fullmatch(text):
        return Validated.failure(
            field, f"{label} must be a valid non-negative integer, got {raw!r}"
        )
    value = int(text)
    if value < 0:
        return Validated.failure(
            field, f"{label} must be a valid non-negative integer, got {raw!r}"
        )
    if value > MAX_INT:
        return Validated.failure(field, f"{label} cannot exceed {MAX_INT}, got {raw!r}")
    return Validated.success(field, value)


def validate_quantity(raw: str | None) -> Validated[int]:
    return _non_negative_int("quantity", "Quantity", raw)


def validate_threshold(raw: str | None) -> Validated[int]:
    return _non_negative_int("threshold", "Threshold", raw)


def validate_price(raw: str | None) -> Validated[float]:
    text = (raw or "").strip()
    reason = f"Price must be a valid non-negative number, got {raw!r}"
    if not text or "_" in text:
        return Validated.failure("price", reason)
    try:
        value = float(text)
    except ValueError:
        return Validated.failure("price", reason)
    if not math.isfinite(value) or value < 0:
        return Validated.failure("price", reason)
    return Validated.success("price", value)


def validate_status(raw: str | None) -> Validated[StockStatus]:
    if raw is None:
        return Validated.failure("status", "Status cannot be empty")
    try:
        return Validated.success("status", StockStatus.parse(raw))
    except ValidationError as exc:
        return Validated.failure("status", f"{exc}, got {raw!r}")
