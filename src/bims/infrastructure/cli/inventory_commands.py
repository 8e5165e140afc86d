"""CLI commands for inventory management."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import click

from bims.application.dto import Outcome
from bims.application.engine import InventoryEngine
from bims.domain.exceptions import StorageError
from bims.domain.model.item import InventoryItem
from bims.infrastructure.bootstrap import Settings

T = TypeVar("T")


class StorageFault(click.ClickException):
    """The data store failed; distinct exit code from rejected input."""

    exit_code = 3

    def format_message(self) -> str:
        return f"Storage error: {self.message}"


def _run(settings: Settings, action: Callable[[InventoryEngine], Outcome[T]]) -> Outcome[T]:
    try:
        outcome = action(settings.engine())
    except StorageError as exc:
        raise StorageFault(str(exc)) from exc
    if not outcome.ok:
        raise click.ClickException(outcome.message)
    return outcome


def _print_items(items: list[InventoryItem]) -> None:
    click.echo(f"{'ID':<10} {'Description':<30} {'Qty':>6} {'Price':>10} {'Status':<12}")
    click.echo("-" * 72)
    for item in items:
        click.echo(
            f"{item.id:<10} {item.description:<30} {item.quantity:>6} "
            f"{'$' + format(item.price, '.2f'):>10} {item.status.value:<12}"
        )


@click.command("list")
@click.pass_obj
def inventory_list(settings: Settings) -> None:
    """Show every item in the catalog."""
    outcome = _run(settings, lambda engine: engine.list_items())

    if not outcome.data:
        click.echo("No items found.")
        return
    _print_items(outcome.data)


@click.command("show")
@click.option("--id", "item_id", required=True, help="Item ID.")
@click.pass_obj
def inventory_show(settings: Settings, item_id: str) -> None:
    """Show a single item."""
    outcome = _run(settings, lambda engine: engine.get_item(item_id))
    click.echo(outcome.message)


@click.command("add")
@click.option("--id", "item_id", required=True, help="Unique item ID (e.g. 002).")
@click.option("--description", required=True, help="Name and short description.")
@click.option("--quantity", required=True, help="Units in stock.")
@click.option("--price", required=True, help="Unit price (e.g. 19.99).")
@click.pass_obj
def inventory_add(
    settings: Settings, item_id: str, description: str, quantity: str, price: str
) -> None:
    """Add a new item (status starts as In Stock)."""
    outcome = _run(settings, lambda engine: engine.add(item_id, description, quantity, price))
    click.echo(outcome.message)


@click.command("remove")
@click.option("--id", "item_id", required=True, help="Item ID to delete.")
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation prompt.")
@click.pass_obj
def inventory_remove(settings: Settings, item_id: str, yes: bool) -> None:
    """Permanently delete an item."""
    if not yes:
        click.confirm(
            f"You are about to permanently delete item '{item_id}'. "
            "This cannot be undone. Proceed?",
            abort=True,
        )
    outcome = _run(settings, lambda engine: engine.remove(item_id))
    click.echo(outcome.message)


@click.command("update")
@click.option("--id", "item_id", required=True, help="Item ID.")
@click.option("--field", required=True, help="One of: quantity, price, status.")
@click.option("--value", required=True, help="New value for the field.")
@click.pass_obj
def inventory_update(settings: Settings, item_id: str, field: str, value: str) -> None:
    """Change the quantity, price or status of an item.

    Setting the quantity also flips the status when stock runs out or
    comes back.
    """
    outcome = _run(settings, lambda engine: engine.update_field(item_id, field, value))
    click.echo(outcome.message)


@click.command("load")
@click.argument("file_path")
@click.pass_obj
def inventory_load(settings: Settings, file_path: str) -> None:
    """Load items from a comma-separated text file.

    Each line reads id,description,quantity,price,status. Bad lines are
    skipped and listed.
    """
    outcome = _run(settings, lambda engine: engine.load_file(file_path))

    click.echo(outcome.message)
    for warning in outcome.data.warnings:
        click.echo(f"  Warning: {warning}")


@click.command("low-stock")
@click.option("--threshold", required=True, help="Report items with quantity below this.")
@click.pass_obj
def inventory_low_stock(settings: Settings, threshold: str) -> None:
    """Report items whose quantity is below a threshold."""
    outcome = _run(settings, lambda engine: engine.low_stock_report(threshold))

    if not outcome.data:
        click.echo(outcome.message)
        return
    click.echo(f"--- Items Below Stock Threshold ({threshold.strip()}) ---")
    _print_items(outcome.data)
