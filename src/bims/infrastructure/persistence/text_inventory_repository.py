"""Flat-file implementation of InventoryRepository.

One item per line in the ``id,description,quantity,price,status`` layout
the bulk loader reads, so a saved catalog can be loaded again. Fields that
contain a comma are quoted CSV-style; the bulk loader does not understand
quoting, so such lines only round-trip through this repository.
The file is read on every call and rewritten whole on every change.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path

from bims.domain.exceptions import StorageError
from bims.domain.model.item import InventoryItem, StockStatus
from bims.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class TextFileInventoryRepository(InventoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- InventoryRepository interface ----------------------------------------

    def list_all(self) -> list[InventoryItem]:
        return self._load()

    def get_by_id(self, item_id: str) -> InventoryItem | None:
        for item in self._load():
            if item.matches_id(item_id):
                return item
        return None

    def exists(self, item_id: str) -> bool:
        return self.get_by_id(item_id) is not None

    def insert(self, item: InventoryItem) -> bool:
        items = self._load()
        if any(existing.matches_id(item.id) for existing in items):
            return False
        items.append(item)
        self._persist(items)
        return True

    def update(self, item: InventoryItem) -> bool:
        items = self._load()
        for i, existing in enumerate(items):
            if existing.matches_id(item.id):
                items[i] = InventoryItem(
                    id=existing.id,
                    description=item.description,
                    quantity=item.quantity,
                    price=item.price,
                    status=item.status,
                )
                self._persist(items)
                return True
        return False

    def delete(self, item_id: str) -> bool:
        items = self._load()
        remaining = [item for item in items if not item.matches_id(item_id)]
        if len(remaining) == len(items):
            return False
        self._persist(remaining)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_row(item: InventoryItem) -> list[str]:
        return [item.id, item.description, str(item.quantity), repr(item.price), item.status.value]

    def _to_domain(self, line_number: int, row: list[str]) -> InventoryItem:
        try:
            item_id, description, quantity, price, status = row
            return InventoryItem(
                id=item_id,
                description=description,
                quantity=int(quantity),
                price=float(price),
                status=StockStatus(status),
            )
        except ValueError as exc:
            logger.error("Corrupt record at %s:%d: %r", self._file_path, line_number, row)
            raise StorageError(
                f"Corrupt record on line {line_number} of '{self._file_path}'"
            ) from exc

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> list[InventoryItem]:
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot read %s: %s", self._file_path, exc)
            raise StorageError(f"Cannot read '{self._file_path}': {exc}") from exc
        reader = csv.reader(io.StringIO(text))
        try:
            return [self._to_domain(reader.line_num, row) for row in reader if row]
        except csv.Error as exc:
            logger.error("Malformed %s: %s", self._file_path, exc)
            raise StorageError(f"Malformed file '{self._file_path}': {exc}") from exc

    def _persist(self, items: list[InventoryItem]) -> None:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerows(self._to_row(item) for item in items)
        try:
            self._file_path.write_text(buffer.getvalue(), encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot write %s: %s", self._file_path, exc)
            raise StorageError(f"Cannot write '{self._file_path}': {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("", encoding="utf-8")
        except OSError as exc:
            logger.error("Cannot create %s: %s", self._file_path, exc)
            raise StorageError(f"Cannot create '{self._file_path}': {exc}") from exc
