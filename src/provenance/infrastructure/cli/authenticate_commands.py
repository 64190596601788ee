"""CLI commands for authenticity checks."""

from __future__ import annotations

import click

from provenance.domain.exceptions import DomainException
from provenance.infrastructure.cli.context import CliState, pass_state
from provenance.infrastructure.cli.product_commands import display_steps


@click.command("product")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_state
def authenticate_product(state: CliState, product_id: int) -> None:
    """Print the chain of custody for manual inspection."""
    steps = state.registry.authenticate_product(product_id)

    if not steps:
        click.echo(f"No provenance recorded for product #{product_id}.")
        return

    click.echo(f"Chain of custody for product #{product_id}")
    display_steps(steps)


@click.command("company")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--company", required=True, help="Company the product claims to come from.")
@pass_state
def authenticate_company(state: CliState, product_id: int, company: str) -> None:
    """Check that a product was registered by the claimed company.

    Exits with status 1 when the claim does not match.
    """
    try:
        genuine = state.registry.authenticate_company_product(product_id, company)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if genuine:
        click.echo(f"Product #{product_id} is registered to '{company}'.")
    else:
        click.echo(f"Product #{product_id} is NOT registered to '{company}'.")
        click.get_current_context().exit(1)
