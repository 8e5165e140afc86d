"""InventoryEngine, the single entry point callers use.

Groups the use-case handlers behind one object bound to one repository.
Every method returns an ``Outcome``; a StorageError from the repository is
the only exception that escapes.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from bims.application.add_item import AddItemHandler
from bims.application.dto import LoadSummary, Outcome, UpdateResult
from bims.application.load_inventory import LoadInventoryHandler
from bims.application.low_stock_report import LowStockReportHandler
from bims.application.remove_item import RemoveItemHandler
from bims.application.show_inventory import ShowInventoryHandler
from bims.application.update_item import UpdateItemHandler
from bims.domain.model.item import InventoryItem
from bims.domain.repository.inventory_repository import InventoryRepository


class InventoryEngine:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._loader = LoadInventoryHandler(inventory_repo)
        self._adder = AddItemHandler(inventory_repo)
        self._remover = RemoveItemHandler(inventory_repo)
        self._updater = UpdateItemHandler(inventory_repo)
        self._reporter = LowStockReportHandler(inventory_repo)
        self._viewer = ShowInventoryHandler(inventory_repo)

    def bulk_load(self, lines: Iterable[str]) -> Outcome[LoadSummary]:
        return self._loader.handle(lines)

    def load_file(self, file_path: str | Path | None) -> Outcome[LoadSummary]:
        return self._loader.handle_file(file_path)

    def add(
        self,
        item_id: str | None,
        description: str | None,
        quantity: str | None,
        price: str | None,
    ) -> Outcome[InventoryItem]:
        return self._adder.handle(item_id, description, quantity, price)

    def remove(self, item_id: str | None) -> Outcome[InventoryItem]:
        return self._remover.handle(item_id)

    def update_field(
        self, item_id: str | None, field: str | None, new_value: str | None
    ) -> Outcome[UpdateResult]:
        return self._updater.handle(item_id, field, new_value)

    def low_stock_report(self, threshold: str | None) -> Outcome[list[InventoryItem]]:
        return self._reporter.handle(threshold)

    def list_items(self) -> Outcome[list[InventoryItem]]:
        return self._viewer.handle()

    def get_item(self, item_id: str | None) -> Outcome[InventoryItem]:
        return self._viewer.handle_one(item_id)
