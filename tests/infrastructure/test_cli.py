"""Tests for the click command-line shell."""

import pytest
from click.testing import CliRunner

from bims.application.engine import InventoryEngine
from bims.domain.exceptions import StorageError
from bims.infrastructure.bootstrap import Settings
from bims.infrastructure.cli.inventory_commands import StorageFault, _run
from bims.infrastructure.cli.main import cli
from tests.fakes import BrokenInventoryRepository


@pytest.fixture
def invoke(tmp_path):
    runner = CliRunner()
    data = tmp_path / "inventory.txt"

    def _invoke(*args, input=None):
        return runner.invoke(cli, ["--data", str(data), "inventory", *args], input=input)

    return _invoke


class TestInventoryCommands:

    def test_list_empty(self, invoke):
        result = invoke("list")
        assert result.exit_code == 0
        assert "No items found." in result.output

    def test_add_then_list(self, invoke):
        result = invoke("add", "--id", "001", "--description", "Rose Quartz",
                        "--quantity", "10", "--price", "25.5")
        assert result.exit_code == 0
        assert "Successfully added" in result.output

        result = invoke("list")
        assert "Rose Quartz" in result.output
        assert "$25.50" in result.output
        assert "In Stock" in result.output

    def test_rejected_input_exits_nonzero(self, invoke):
        result = invoke("add", "--id", "001", "--description", "Rose Quartz",
                        "--quantity", "-1", "--price", "25.5")
        assert result.exit_code == 1
        assert "Quantity must be a valid non-negative integer" in result.output

    def test_update_quantity_flips_status(self, invoke):
        invoke("add", "--id", "001", "--description", "Rose Quartz", "--quantity", "10", "--price", "1")
        result = invoke("update", "--id", "001", "--field", "quantity", "--value", "0")
        assert result.exit_code == 0
        assert "Status automatically updated to 'Out of Stock'" in result.output

    def test_remove_asks_for_confirmation(self, invoke):
        invoke("add", "--id", "001", "--description", "Rose Quartz", "--quantity", "1", "--price", "1")

        result = invoke("remove", "--id", "001", input="n\n")
        assert result.exit_code == 1
        assert "Rose Quartz" in invoke("list").output

        result = invoke("remove", "--id", "001", input="y\n")
        assert result.exit_code == 0
        assert "Successfully removed 'Rose Quartz'" in result.output

    def test_remove_missing_with_yes(self, invoke):
        result = invoke("remove", "--id", "404", "--yes")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_load_reports_warnings(self, invoke, tmp_path):
        source = tmp_path / "incoming.txt"
        source.write_text("001,Good,10,19.99,In Stock\n002,Short,10,19.99\n", encoding="utf-8")

        result = invoke("load", str(source))

        assert result.exit_code == 0
        assert "Successfully loaded 1 item(s)" in result.output
        assert "Warning: Line 2:" in result.output

    def test_load_missing_file(self, invoke, tmp_path):
        result = invoke("load", str(tmp_path / "nope.txt"))
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_low_stock(self, invoke):
        for item_id, qty in [("a", "2"), ("b", "10"), ("c", "1"), ("d", "7")]:
            invoke("add", "--id", item_id, "--description", f"Bracelet {item_id}",
                   "--quantity", qty, "--price", "1")

        result = invoke("low-stock", "--threshold", "5")

        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if line.startswith(("a ", "c "))]
        assert [line.split()[0] for line in lines] == ["c", "a"]

    def test_low_stock_invalid_threshold(self, invoke):
        result = invoke("low-stock", "--threshold", "abc")
        assert result.exit_code == 1
        assert "Threshold must be" in result.output

    def test_show(self, invoke):
        invoke("add", "--id", "001", "--description", "Rose Quartz", "--quantity", "1", "--price", "1")
        result = invoke("show", "--id", "001")
        assert "ID: 001, Description: Rose Quartz" in result.output


class TestBackendSelection:

    def test_sql_backend_from_envvar(self, tmp_path):
        runner = CliRunner()
        env = {"BIMS_BACKEND": "sql", "BIMS_DATA": str(tmp_path / "stock.db")}
        result = runner.invoke(
            cli,
            ["inventory", "add", "--id", "1", "--description", "Jade", "--quantity", "3", "--price", "2"],
            env=env,
        )
        assert result.exit_code == 0
        assert (tmp_path / "stock.db").exists()
        assert "Jade" in runner.invoke(cli, ["inventory", "list"], env=env).output

    def test_storage_fault_has_own_exit_code(self, tmp_path):
        data = tmp_path / "inventory.txt"
        data.write_text("001,Broken,many,1.0,In Stock\n", encoding="utf-8")
        result = CliRunner().invoke(cli, ["--data", str(data), "inventory", "list"])
        assert result.exit_code == 3
        assert "Storage error:" in result.output

    def test_storage_fault_keeps_underlying_error(self):
        settings = Settings(backend="memory", _engine=InventoryEngine(BrokenInventoryRepository()))
        with pytest.raises(StorageFault) as excinfo:
            _run(settings, lambda engine: engine.list_items())
        assert isinstance(excinfo.value.__cause__, StorageError)
        assert excinfo.value.exit_code == 3
