"""InventoryItem aggregate for one bracelet in the catalog.

The item knows its own stock level and status. The only rule tying the two
together lives in ``reconcile_status`` and is applied when the quantity is
changed through ``set_quantity``. Construction and direct status writes take
the status exactly as given.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum

from bims.domain.exceptions import ValidationError


class StockStatus(Enum):
    IN_STOCK = "In Stock"
    OUT_OF_STOCK = "Out of Stock"

    @classmethod
    def parse(cls, label: str) -> StockStatus:
        """Match a status label case-insensitively, ignoring outer whitespace."""
        wanted = label.strip().lower()
        for status in cls:
            if status.value.lower() == wanted:
                return status
        raise ValidationError(
            f"Status must be '{cls.IN_STOCK.value}' or '{cls.OUT_OF_STOCK.value}'",
            field="status",
        )

    def __str__(self) -> str:
        return self.value


def reconcile_status(old_status: StockStatus, new_quantity: int) -> StockStatus:
    """Return the status an item must have after its quantity becomes ``new_quantity``."""
    if new_quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if new_quantity > 0:
        return StockStatus.IN_STOCK
    return old_status


@dataclass
class InventoryItem:
    """Aggregate root for a catalog entry.

    Invariants:
    - ``id`` never changes once the item exists
    - ``quantity`` and ``price`` are never negative
    - after ``set_quantity`` the status agrees with the quantity
    """

    id: str
    description: str
    quantity: int
    price: float
    status: StockStatus = StockStatus.IN_STOCK

    def set_quantity(self, quantity: int) -> bool:
        """Change the stock level and reconcile the status.

        Returns True when the status flipped as a result.
        """
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative", field="quantity")
        previous = self.status
        self.quantity = quantity
        self.status = reconcile_status(previous, quantity)
        return self.status is not previous

    def set_price(self, price: float) -> None:
        if price < 0:
            raise ValidationError("Price cannot be negative", field="price")
        self.price = price

    def set_status(self, status: StockStatus) -> None:
        """Manual override. No cross-check against the quantity."""
        self.status = status

    def matches_id(self, item_id: str) -> bool:
        return self.id.lower() == item_id.strip().lower()

    def copy(self) -> InventoryItem:
        return dataclasses.replace(self)

    def __str__(self) -> str:
        return (
            f"ID: {self.id}, Description: {self.description}, "
            f"Quantity: {self.quantity}, Price: ${self.price:.2f}, "
            f"Status: {self.status}"
        )
