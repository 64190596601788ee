"""CLI commands for the Product aggregate and its history.

``--as`` names the principal making the call.  The CLI trusts it as
given: authenticating that principal is the job of whatever wraps the
command.
"""

from __future__ import annotations

import click

from provenance.domain.exceptions import DomainException
from provenance.domain.model.product_step import ProductStep
from provenance.domain.model.value_objects import Principal
from provenance.infrastructure.cli.context import CliState, pass_state

_TIME_FORMAT = "%Y-%m-%d %H:%M UTC"


def display_steps(steps: list[ProductStep]) -> None:
    """Shared formatting for a provenance history."""
    click.echo(f"  {'#':>3} {'Status':<16} {'Location':<20} {'By':<16} {'Recorded':<20}")
    click.echo(f"  {'-'*78}")
    for number, step in enumerate(steps, start=1):
        click.echo(
            f"  {number:>3} {step.status:<16} {step.location:<20} "
            f"{str(step.stakeholder):<16} {step.recorded_at.strftime(_TIME_FORMAT):<20}"
        )


@click.command("register")
@click.option("--id", "product_id", required=True, type=int, help="Product ID (non-zero).")
@click.option("--name", required=True, help="Product name.")
@click.option("--company", required=True, help="Registering company name.")
@click.option("--location", required=True, help="Where the product was manufactured.")
@click.option("--as", "caller", required=True, help="Principal registering the product.")
@pass_state
def product_register(
    state: CliState,
    product_id: int,
    name: str,
    company: str,
    location: str,
    caller: str,
) -> None:
    """Register a newly manufactured product."""
    try:
        state.registry.register(
            product_id=product_id,
            name=name,
            company_name=company,
            location=location,
            caller=Principal(caller),
            now=state.clock.now_utc(),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} '{name}' registered by {caller} at {location}")


@click.command("status")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--status", required=True, help="New status, e.g. Shipped.")
@click.option("--location", required=True, help="Current location.")
@click.option("--as", "caller", required=True, help="Principal recording the step (must be the owner).")
@pass_state
def product_status(
    state: CliState,
    product_id: int,
    status: str,
    location: str,
    caller: str,
) -> None:
    """Record a new status for a product you own."""
    try:
        state.registry.update_status(
            product_id=product_id,
            status=status,
            location=location,
            caller=Principal(caller),
            now=state.clock.now_utc(),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} is now '{status}' at {location}")


@click.command("transfer")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--to", "new_owner", required=True, help="Principal receiving the product.")
@click.option("--as", "caller", required=True, help="Current owner.")
@pass_state
def product_transfer(state: CliState, product_id: int, new_owner: str, caller: str) -> None:
    """Hand a product you own to someone else."""
    try:
        state.registry.transfer_ownership(
            product_id=product_id,
            new_owner=Principal(new_owner),
            caller=Principal(caller),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} transferred to {new_owner}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID to display.")
@pass_state
def product_show(state: CliState, product_id: int) -> None:
    """Show details of a registered product."""
    try:
        dto = state.registry.get_product_details(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"Company:      {dto.company_name}")
    click.echo(f"Manufacturer: {dto.manufacturer}")
    click.echo(f"Owner:        {dto.current_owner}")
    click.echo(f"Created:      {dto.created_at.strftime(_TIME_FORMAT)}")


@click.command("list")
@pass_state
def product_list(state: CliState) -> None:
    """List all registered products."""
    products = state.registry.list_products()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Company':<20} {'Owner':<16}")
    click.echo("-" * 65)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.company_name:<20} {str(p.current_owner):<16}"
        )


@click.command("history")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_state
def product_history(state: CliState, product_id: int) -> None:
    """Show the full provenance history of a product."""
    steps = state.registry.get_product_history(product_id)

    if not steps:
        click.echo(f"No history recorded for product #{product_id}.")
        return

    click.echo(f"History of product #{product_id}")
    display_steps(steps)


@click.command("last")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_state
def product_last(state: CliState, product_id: int) -> None:
    """Show the most recent status of a product."""
    try:
        step = state.registry.get_last_product_status(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product_id}: {step.status} at {step.location} "
        f"(by {step.stakeholder}, {step.recorded_at.strftime(_TIME_FORMAT)})"
    )
