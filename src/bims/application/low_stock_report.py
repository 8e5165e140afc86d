"""Application service: Low Stock Report use case (query)."""

from __future__ import annotations

from bims.application.dto import Outcome
from bims.domain.exceptions import ValidationError
from bims.domain.model.item import InventoryItem
from bims.domain.model.validators import validate_threshold
from bims.domain.repository.inventory_repository import InventoryRepository


class LowStockReportHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, threshold: str | None) -> Outcome[list[InventoryItem]]:
        """Items with quantity strictly below ``threshold``, lowest first.

        Items with equal quantity keep their storage order.
        """
        try:
            limit = validate_threshold(threshold).unwrap()
        except ValidationError as exc:
            return Outcome.from_exception(exc)

        low = sorted(
            (item for item in self._inventory_repo.list_all() if item.quantity < limit),
            key=lambda item: item.quantity,
        )
        if not low:
            return Outcome.success(f"No items below the stock threshold of {limit}", [])
        return Outcome.success(f"{len(low)} item(s) below the stock threshold of {limit}", low)
