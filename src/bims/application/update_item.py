"""Application service: Update Item use case.

Only quantity, price and status can change after an item is created.
Changing the quantity also reconciles the stock status; setting the
status directly is a manual override and is not checked against the
quantity.
"""

from __future__ import annotations

import logging

from bims.application.dto import Outcome, UpdateResult
from bims.domain.exceptions import DomainException, EntityNotFoundError, ValidationError
from bims.domain.model.validators import (
    validate_id,
    validate_price,
    validate_quantity,
    validate_status,
)
from bims.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("quantity", "price", "status")


class UpdateItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(
        self, item_id: str | None, field: str | None, new_value: str | None
    ) -> Outcome[UpdateResult]:
        try:
            result = self._apply(item_id, field, new_value)
        except DomainException as exc:
            logger.debug("Rejected update of %r (%s): %s", item_id, field, exc)
            return Outcome.from_exception(exc)

        if not result.changed:
            current = getattr(result.item, result.field)
            return Outcome.success(
                f"No change: {result.field} is already {_display(current)}", result
            )

        logger.info("Updated %s of item %s", result.field, result.item.id)
        message = f"{result.field.capitalize()} updated."
        if result.status_flipped:
            message += f" Status automatically updated to '{result.item.status}'."
        return Outcome.success(f"{message} Updated item: {result.item}", result)

    def _apply(
        self, item_id: str | None, field: str | None, new_value: str | None
    ) -> UpdateResult:
        key = validate_id(item_id).unwrap()
        stored = self._inventory_repo.get_by_id(key)
        if stored is None:
            raise EntityNotFoundError(f"Item with ID '{key}' not found in inventory")

        name = (field or "").strip().lower()
        if name not in UPDATABLE_FIELDS:
            raise ValidationError(
                "Invalid field to update. Choose 'quantity', 'price', or 'status'",
                field="field",
            )

        # Work on a copy so a rejected value leaves the stored item untouched.
        item = stored.copy()
        flipped = False
        if name == "quantity":
            quantity = validate_quantity(new_value).unwrap()
            changed = quantity != item.quantity
            flipped = item.set_quantity(quantity)
            changed = changed or flipped
        elif name == "price":
            price = validate_price(new_value).unwrap()
            changed = price != item.price
            item.set_price(price)
        else:
            status = validate_status(new_value).unwrap()
            changed = status is not item.status
            item.set_status(status)

        if changed and not self._inventory_repo.update(item):
            raise EntityNotFoundError(f"Item with ID '{key}' not found in inventory")
        return UpdateResult(item=item, field=name, changed=changed, status_flipped=flipped)


def _display(value: object) -> str:
    if isinstance(value, float):
        return f"${value:.2f}"
    if isinstance(value, int):
        return str(value)
    return f"'{value}'"
