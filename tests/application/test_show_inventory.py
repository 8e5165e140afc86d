"""Tests for the ShowInventory queries."""

from bims.application.dto import OutcomeKind
from bims.application.show_inventory import ShowInventoryHandler
from bims.domain.model.item import InventoryItem
from tests.fakes import FakeInventoryRepository


class TestShowInventory:

    def test_lists_in_storage_order(self):
        repo = FakeInventoryRepository([
            InventoryItem(id="B", description="Second", quantity=1, price=1.0),
            InventoryItem(id="A", description="First", quantity=2, price=2.0),
        ])
        outcome = ShowInventoryHandler(repo).handle()
        assert outcome.ok
        assert [item.id for item in outcome.data] == ["B", "A"]

    def test_empty_catalog(self):
        outcome = ShowInventoryHandler(FakeInventoryRepository()).handle()
        assert outcome.ok
        assert outcome.data == []
        assert outcome.message == "Inventory is empty"


class TestShowOne:

    def test_found(self):
        repo = FakeInventoryRepository([
            InventoryItem(id="A", description="First", quantity=2, price=2.0),
        ])
        outcome = ShowInventoryHandler(repo).handle_one("a")
        assert outcome.ok
        assert outcome.data.description == "First"

    def test_not_found(self):
        outcome = ShowInventoryHandler(FakeInventoryRepository()).handle_one("Z")
        assert outcome.kind is OutcomeKind.NOT_FOUND

    def test_blank_id(self):
        outcome = ShowInventoryHandler(FakeInventoryRepository()).handle_one(" ")
        assert outcome.kind is OutcomeKind.VALIDATION_ERROR
