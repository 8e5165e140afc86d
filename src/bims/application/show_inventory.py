"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from bims.application.dto import Outcome
from bims.domain.exceptions import DomainException, EntityNotFoundError
from bims.domain.model.item import InventoryItem
from bims.domain.model.validators import validate_id
from bims.domain.repository.inventory_repository import InventoryRepository


class ShowInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self) -> Outcome[list[InventoryItem]]:
        items = self._inventory_repo.list_all()
        if not items:
            return Outcome.success("Inventory is empty", [])
        return Outcome.success(f"{len(items)} item(s) in inventory", items)

    def handle_one(self, item_id: str | None) -> Outcome[InventoryItem]:
        try:
            key = validate_id(item_id).unwrap()
            item = self._inventory_repo.get_by_id(key)
            if item is None:
                raise EntityNotFoundError(f"Item with ID '{key}' not found in inventory")
        except DomainException as exc:
            return Outcome.from_exception(exc)
        return Outcome.success(str(item), item)
