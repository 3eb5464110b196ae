"""CLI command for live price calculation."""

from __future__ import annotations

import click

from salesdesk.application.calculate_price import CalculatePriceHandler
from salesdesk.application.dto import PriceCalculationDTO
from salesdesk.domain.exceptions import DomainException
from salesdesk.infrastructure import settings
from salesdesk.infrastructure.cli.parsing import parse_labelled, parse_rows, to_click_exception


def display_totals(dto: PriceCalculationDTO) -> None:
    """Shared formatting for a priced set of line items."""
    click.echo(
        f"  {'Item':<20} {'Qty':>5} {'Price':>10} {'Discount':>10} {'Tax':>10} {'Total':>12}"
    )
    click.echo(f"  {'-'*72}")
    for line in dto.lines:
        click.echo(
            f"  {line.name:<20} {line.quantity:>5} {line.unit_price:>10} "
            f"{line.discount:>10} {line.tax:>10} {line.line_total:>12}"
        )
    click.echo(f"  {'-'*72}")
    click.echo(f"  {'Subtotal':<58} {dto.subtotal:>14}")
    click.echo(f"  {'Discount':<58} {'-' + dto.total_discount:>14}")
    click.echo(f"  {'Tax':<58} {dto.total_tax:>14}")
    click.echo(f"  {'Shipping':<58} {dto.shipping_cost:>14}")
    click.echo(f"  {'Grand Total':<58} {dto.grand_total:>14}")


@click.command("price")
@click.option("--items", required=True, help="Items as 'Name:Qty:Price[:Discount%[:Tax%]],...'.")
@click.option("--shipping", default="0", show_default=True, help="Shipping cost.")
@click.option("--discount", "discounts", multiple=True, help="Document discount as 'Label=Amount'.")
@click.option("--tax", "taxes", multiple=True, help="Document tax as 'Label=Rate%'.")
def price(items: str, shipping: str, discounts: tuple[str, ...], taxes: tuple[str, ...]) -> None:
    """Calculate totals for a set of line items."""
    rows = parse_rows(items, "name")
    handler = CalculatePriceHandler(currency=settings.CURRENCY)

    try:
        dto = handler.handle(
            rows,
            shipping_cost=shipping,
            discounts=parse_labelled(discounts, "discount"),
            taxes=parse_labelled(taxes, "tax"),
        )
    except DomainException as exc:
        raise to_click_exception(exc)

    display_totals(dto)
