"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from salesdesk.application.show_order import ShowOrderHandler
from salesdesk.application.update_order import (
    AssignWarehouseHandler,
    UpdateOrderStatusHandler,
    UpdatePaymentStatusHandler,
)
from salesdesk.domain.exceptions import DomainException
from salesdesk.domain.model.order import OrderStatus, PaymentStatus
from salesdesk.infrastructure.bootstrap import order_repository
from salesdesk.infrastructure.cli.parsing import to_click_exception
from salesdesk.infrastructure.cli.price_commands import display_totals


@click.command("show")
@click.argument("number")
def order_show(number: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(number)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Order {dto.order_number}  (status={dto.status})")
    click.echo(f"Customer:    {dto.customer_name}")
    click.echo(f"Created:     {dto.created_at}")
    click.echo(f"Payment:     {dto.payment_status}")
    click.echo(f"Fulfillment: {dto.fulfillment_status}")
    click.echo(f"Warehouse:   {dto.warehouse or 'unassigned'}")
    if dto.quotation_number:
        click.echo(f"Quotation:   {dto.quotation_number}")
    click.echo()
    display_totals(dto.totals)


@click.command("status")
@click.argument("number")
@click.argument("status", type=click.Choice([s.value for s in OrderStatus]))
@click.option("--notes", default="", help="Note recorded with the change.")
def order_status(number: str, status: str, notes: str) -> None:
    """Move an order to a new status."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        handler.handle(number, status, notes=notes)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Order {number} is now {status}.")


@click.command("payment")
@click.argument("number")
@click.argument("status", type=click.Choice([s.value for s in PaymentStatus]))
def order_payment(number: str, status: str) -> None:
    """Update an order's payment status."""
    handler = UpdatePaymentStatusHandler(order_repo=order_repository())

    try:
        handler.handle(number, status)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Order {number} payment is now {status}.")


@click.command("assign-warehouse")
@click.argument("number")
@click.argument("warehouse")
def order_assign_warehouse(number: str, warehouse: str) -> None:
    """Assign the warehouse that will fulfil an order."""
    handler = AssignWarehouseHandler(order_repo=order_repository())

    try:
        handler.handle(number, warehouse)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Order {number} assigned to {warehouse}.")
