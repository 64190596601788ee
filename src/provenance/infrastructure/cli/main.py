import logging
from pathlib import Path

import click

from provenance.infrastructure.bootstrap import DEFAULT_DATA_DIR, json_registry
from provenance.infrastructure.cli.authenticate_commands import (
    authenticate_company,
    authenticate_product,
)
from provenance.infrastructure.cli.context import CliState
from provenance.infrastructure.cli.product_commands import (
    product_history,
    product_last,
    product_list,
    product_register,
    product_show,
    product_status,
    product_transfer,
)
from provenance.infrastructure.clock import SystemClock


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="PROVENANCE_DATA_DIR",
    show_default=True,
    help="Directory holding products.json and history.json.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log registry activity.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """Product provenance registry"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CliState(registry=json_registry(data_dir), clock=SystemClock())


@cli.group()
def product() -> None:
    """Register, update and inspect products."""


@cli.group()
def authenticate() -> None:
    """Verify product authenticity."""


# Register subcommands
product.add_command(product_register)
product.add_command(product_status)
product.add_command(product_transfer)
product.add_command(product_show)
product.add_command(product_list)
product.add_command(product_history)
product.add_command(product_last)
authenticate.add_command(authenticate_product)
authenticate.add_command(authenticate_company)
