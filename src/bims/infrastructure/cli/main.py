import logging
from pathlib import Path

import click

from bims.infrastructure.bootstrap import BACKENDS, DEFAULT_BACKEND, Settings
from bims.infrastructure.cli.inventory_commands import (
    inventory_add,
    inventory_list,
    inventory_load,
    inventory_low_stock,
    inventory_remove,
    inventory_show,
    inventory_update,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.option(
    "--backend",
    type=click.Choice(BACKENDS),
    default=DEFAULT_BACKEND,
    show_default=True,
    envvar="BIMS_BACKEND",
    help="Where items are stored.",
)
@click.option(
    "--data",
    "data_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="BIMS_DATA",
    help="Data file for the file and sql backends.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, backend: str, data_path: Path | None, verbose: bool) -> None:
    """BIMS — Bracelet Inventory Management System"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR, format=LOG_FORMAT, force=True
    )
    ctx.obj = Settings(backend=backend, data_path=data_path)


@cli.group()
def inventory() -> None:
    """Manage inventory."""


# Register subcommands
inventory.add_command(inventory_add)
inventory.add_command(inventory_list)
inventory.add_command(inventory_load)
inventory.add_command(inventory_low_stock)
inventory.add_command(inventory_remove)
inventory.add_command(inventory_show)
inventory.add_command(inventory_update)
