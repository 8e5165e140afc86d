"""Application service: Remove Item use case."""

from __future__ import annotations

import logging

from bims.application.dto import Outcome
from bims.domain.exceptions import DomainException, EntityNotFoundError
from bims.domain.model.item import InventoryItem
from bims.domain.model.validators import validate_id
from bims.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class RemoveItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, item_id: str | None) -> Outcome[InventoryItem]:
        """Delete an item; the outcome carries the removed item."""
        try:
            key = validate_id(item_id).unwrap()
            item = self._inventory_repo.get_by_id(key)
            if item is None or not self._inventory_repo.delete(key):
                raise EntityNotFoundError(f"Item with ID '{key}' not found in inventory")
        except DomainException as exc:
            logger.debug("Rejected removal of %r: %s", item_id, exc)
            return Outcome.from_exception(exc)

        logger.info("Removed item %s", item.id)
        return Outcome.success(
            f"Successfully removed '{item.description}' (ID: {item.id})", item
        )
