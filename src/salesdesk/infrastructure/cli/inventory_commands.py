"""CLI commands for inventory management."""

from __future__ import annotations

import click

from salesdesk.application.set_inventory import SetInventoryHandler
from salesdesk.application.show_inventory import ShowInventoryHandler
from salesdesk.domain.exceptions import DomainException
from salesdesk.infrastructure.bootstrap import product_repository
from salesdesk.infrastructure.cli.parsing import to_click_exception


@click.command("set")
@click.option("--sku", required=True, help="Product SKU.")
@click.option("--quantity", required=True, type=int, help="Units currently in stock.")
@click.option("--min-stock", default=None, type=int, help="Reorder point.")
@click.option("--location", default=None, help="Bin as 'Zone-Aisle-Shelf-Bin'.")
def inventory_set(sku: str, quantity: int, min_stock: int | None, location: str | None) -> None:
    """Set inventory level for a product."""
    handler = SetInventoryHandler(product_repo=product_repository())

    try:
        handler.handle(sku=sku, quantity=quantity, min_stock=min_stock, location=location)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Inventory for '{sku}' set to {quantity}")


@click.command("show")
@click.option("--low", "low_only", is_flag=True, default=False, help="Only low or out of stock.")
def inventory_show(low_only: bool) -> None:
    """Show current inventory levels."""
    handler = ShowInventoryHandler(product_repo=product_repository())
    lines = handler.handle(low_stock_only=low_only)

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(
        f"{'SKU':<12} {'Product':<20} {'Stock':>7} {'Min':>5} {'Location':<14} {'Status':<13}"
    )
    click.echo("-" * 76)
    for line in lines:
        click.echo(
            f"{line.sku:<12} {line.product_name:<20} {line.current:>7} {line.minimum:>5} "
            f"{line.location:<14} {line.status:<13}"
        )
