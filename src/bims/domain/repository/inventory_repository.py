"""Abstract repository for the InventoryItem aggregate.

Defined in the domain layer so the engine never depends on a storage
backend. Concrete implementations (in-memory, text file, SQL) live in the
infrastructure layer and are picked by the composition root.

Id lookups are case-insensitive. Implementations raise StorageError when
the backend itself fails; a missing or duplicate id is reported through
the return value instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bims.domain.model.item import InventoryItem


class InventoryRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[InventoryItem]:
        """Return every item, in storage order."""

    @abstractmethod
    def get_by_id(self, item_id: str) -> InventoryItem | None:
        """Return the item with this id, or None."""

    @abstractmethod
    def exists(self, item_id: str) -> bool:
        """Return True if an item with this id is stored."""

    @abstractmethod
    def insert(self, item: InventoryItem) -> bool:
        """Store a new item. Returns False if the id is already taken."""

    @abstractmethod
    def update(self, item: InventoryItem) -> bool:
        """Replace description, quantity, price and status for ``item.id``.

        Returns False if no item with that id exists.
        """

    @abstractmethod
    def delete(self, item_id: str) -> bool:
        """Remove an item. Returns False if no item with that id exists."""
