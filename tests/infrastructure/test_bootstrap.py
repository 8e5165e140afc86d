"""Tests for the composition root."""

import pytest

from bims.application.engine import InventoryEngine
from bims.infrastructure.bootstrap import Settings, inventory_repository
from bims.infrastructure.persistence.memory_inventory_repository import (
    InMemoryInventoryRepository,
)
from bims.infrastructure.persistence.sql_inventory_repository import SqlInventoryRepository
from bims.infrastructure.persistence.text_inventory_repository import (
    TextFileInventoryRepository,
)


class TestInventoryRepository:

    def test_memory(self):
        assert isinstance(inventory_repository("memory"), InMemoryInventoryRepository)

    def test_file(self, tmp_path):
        repo = inventory_repository("file", tmp_path / "stock.txt")
        assert isinstance(repo, TextFileInventoryRepository)
        assert (tmp_path / "stock.txt").exists()

    def test_sql_creates_directory(self, tmp_path):
        repo = inventory_repository("sql", tmp_path / "nested" / "stock.db")
        assert isinstance(repo, SqlInventoryRepository)
        assert (tmp_path / "nested" / "stock.db").exists()

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            inventory_repository("cloud")


class TestSettings:

    def test_engine_is_built_once(self):
        settings = Settings(backend="memory")
        engine = settings.engine()
        assert isinstance(engine, InventoryEngine)
        assert settings.engine() is engine
