"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from salesdesk.application.add_product import AddProductHandler
from salesdesk.application.update_product import UpdateProductHandler
from salesdesk.domain.exceptions import DomainException
from salesdesk.infrastructure import settings
from salesdesk.infrastructure.bootstrap import product_repository
from salesdesk.infrastructure.cli.parsing import to_click_exception


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--sku", required=True, help="Stock keeping unit.")
@click.option("--price", required=True, help="Selling price (e.g. 15.00).")
@click.option("--stock", default=0, type=int, show_default=True, help="Opening stock.")
@click.option("--min-stock", default=0, type=int, show_default=True, help="Reorder point.")
@click.option("--location", default=None, help="Bin as 'Zone-Aisle-Shelf-Bin'.")
def product_add(
    name: str, sku: str, price: str, stock: int, min_stock: int, location: str | None
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository(), currency=settings.CURRENCY)

    try:
        record = handler.handle(
            name=name,
            sku=sku,
            price=price,
            current_stock=stock,
            min_stock=min_stock,
            location=location,
        )
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Product #{record.product_id} '{record.product_name}' ({record.sku}) added at {record.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'SKU':<12} {'Name':<20} {'Price':>10}")
    click.echo("-" * 51)
    for p in products:
        click.echo(f"{p.product_id:<6} {p.sku:<12} {p.product_name:<20} {str(p.price):>10}")


@click.command("update")
@click.option("--sku", required=True, help="Product SKU.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_update(sku: str, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(product_repo=product_repository(), currency=settings.CURRENCY)

    try:
        handler.handle(sku=sku, new_price=price)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Product {sku} price updated to {price}")
