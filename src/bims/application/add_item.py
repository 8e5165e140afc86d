"""Application service: Add Item use case."""

from __future__ import annotations

import logging

from bims.application.dto import Outcome
from bims.domain.exceptions import ConflictError, DomainException
from bims.domain.model.item import InventoryItem, StockStatus
from bims.domain.model.validators import (
    validate_description,
    validate_id,
    validate_price,
    validate_quantity,
)
from bims.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class AddItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(
        self,
        item_id: str | None,
        description: str | None,
        quantity: str | None,
        price: str | None,
    ) -> Outcome[InventoryItem]:
        """Add a new item to the catalog with status In Stock.

        Stops at the first bad field, checked in the order id, uniqueness,
        description, quantity, price.
        """
        try:
            item = self._build(item_id, description, quantity, price)
            if not self._inventory_repo.insert(item):
                raise ConflictError(f"An item with ID '{item.id}' already exists")
        except DomainException as exc:
            logger.debug("Rejected new item %r: %s", item_id, exc)
            return Outcome.from_exception(exc)

        logger.info("Added item %s", item.id)
        return Outcome.success(f"Successfully added: {item}", item)

    def _build(self, item_id, description, quantity, price) -> InventoryItem:
        new_id = validate_id(item_id).unwrap()
        if self._inventory_repo.exists(new_id):
            raise ConflictError(
                f"An item with ID '{new_id}' already exists. Please enter a unique ID"
            )
        return InventoryItem(
            id=new_id,
            description=validate_description(description).unwrap(),
            quantity=validate_quantity(quantity).unwrap(),
            price=validate_price(price).unwrap(),
            status=StockStatus.IN_STOCK,
        )
