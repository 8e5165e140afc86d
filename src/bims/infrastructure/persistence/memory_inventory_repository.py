"""In-memory implementation of InventoryRepository.

Keeps items in a list so storage order is insertion order. Items are
copied on the way in and out; callers never hold a reference into the
store.
"""

from __future__ import annotations

from bims.domain.model.item import InventoryItem
from bims.domain.repository.inventory_repository import InventoryRepository


class InMemoryInventoryRepository(InventoryRepository):

    def __init__(self, items: list[InventoryItem] | None = None) -> None:
        self._items: list[InventoryItem] = []
        for item in items or []:
            self.insert(item)

    def list_all(self) -> list[InventoryItem]:
        return [item.copy() for item in self._items]

    def get_by_id(self, item_id: str) -> InventoryItem | None:
        index = self._index_of(item_id)
        return None if index is None else self._items[index].copy()

    def exists(self, item_id: str) -> bool:
        return self._index_of(item_id) is not None

    def insert(self, item: InventoryItem) -> bool:
        if self.exists(item.id):
            return False
        self._items.append(item.copy())
        return True

    def update(self, item: InventoryItem) -> bool:
        index = self._index_of(item.id)
        if index is None:
            return False
        self._items[index] = InventoryItem(
            id=self._items[index].id,
            description=item.description,
            quantity=item.quantity,
            price=item.price,
            status=item.status,
        )
        return True

    def delete(self, item_id: str) -> bool:
        index = self._index_of(item_id)
        if index is None:
            return False
        del self._items[index]
        return True

    def _index_of(self, item_id: str) -> int | None:
        for i, item in enumerate(self._items):
            if item.matches_id(item_id):
                return i
        return None
