"""Tests for the LowStockReport use case."""

import pytest

from bims.application.dto import OutcomeKind
from bims.application.low_stock_report import LowStockReportHandler
from bims.domain.model.item import InventoryItem
from tests.fakes import FakeInventoryRepository


def _item(item_id: str, quantity: int) -> InventoryItem:
    return InventoryItem(id=item_id, description=f"Bracelet {item_id}", quantity=quantity, price=1.0)


def _setup(quantities: list[int]):
    items = [_item(f"{i:03d}", q) for i, q in enumerate(quantities, start=1)]
    return LowStockReportHandler(FakeInventoryRepository(items))


class TestLowStockReport:

    def test_selects_below_threshold_sorted_by_quantity(self):
        handler = _setup([2, 10, 1, 7])
        outcome = handler.handle("5")

        assert outcome.ok
        assert [item.quantity for item in outcome.data] == [1, 2]
        assert [item.id for item in outcome.data] == ["003", "001"]

    def test_threshold_is_strict(self):
        handler = _setup([5, 4])
        outcome = handler.handle("5")
        assert [item.quantity for item in outcome.data] == [4]

    def test_ties_keep_storage_order(self):
        handler = _setup([3, 1, 3, 1, 3])
        outcome = handler.handle("10")
        assert [item.id for item in outcome.data] == ["002", "004", "001", "003", "005"]

    def test_zero_threshold_is_empty_success(self):
        handler = _setup([2, 10, 1, 7])
        outcome = handler.handle("0")
        assert outcome.kind is OutcomeKind.OK
        assert outcome.data == []
        assert "No items below" in outcome.message

    def test_empty_catalog_is_empty_success(self):
        outcome = _setup([]).handle("3")
        assert outcome.ok
        assert outcome.data == []

    @pytest.mark.parametrize("threshold", ["-2", "abc", "", None, "2.5"])
    def test_invalid_threshold_is_distinct_failure(self, threshold):
        outcome = _setup([1]).handle(threshold)
        assert outcome.kind is OutcomeKind.VALIDATION_ERROR
        assert outcome.field == "threshold"
        assert outcome.data is None
