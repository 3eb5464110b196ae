"""CLI commands for the Quotation aggregate."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import click

from salesdesk.application.check_inventory import CheckQuotationInventoryHandler
from salesdesk.application.convert_quotation import ConvertQuotationHandler
from salesdesk.application.create_quotation import CreateQuotationHandler
from salesdesk.application.dto import QuotationDTO
from salesdesk.application.expire_quotations import ExpireQuotationsHandler
from salesdesk.application.generate_picking_list import GeneratePickingListHandler
from salesdesk.application.show_quotation import ShowQuotationHandler
from salesdesk.application.update_quotation_status import UpdateQuotationStatusHandler
from salesdesk.domain.exceptions import DomainException
from salesdesk.infrastructure import settings
from salesdesk.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    quotation_repository,
)
from salesdesk.infrastructure.cli.parsing import parse_labelled, parse_rows, to_click_exception
from salesdesk.infrastructure.cli.price_commands import display_totals
from salesdesk.infrastructure.export.picking_list_export import to_csv, to_html


def _display_quotation(dto: QuotationDTO) -> None:
    click.echo(f"Quotation {dto.quotation_number}  (status={dto.status})")
    click.echo(f"Customer:    {dto.customer_name}")
    click.echo(f"Created:     {dto.created_at}")
    click.echo(f"Valid until: {dto.valid_until}")
    if dto.converted_to_order:
        click.echo(f"Order:       {dto.converted_to_order}")
    click.echo()
    display_totals(dto.totals)


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--email", default="", help="Customer email.")
@click.option(
    "--items", required=True, help="Items as 'SKU:Qty[:Price[:Discount%[:Tax%]]],...'."
)
@click.option("--valid-until", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Last valid day (defaults to the configured validity period).")
@click.option("--tax", "taxes", multiple=True, help="Document tax as 'Label=Rate%'.")
@click.option("--notes", default="", help="Notes shown to the customer.")
@click.option("--terms", default="", help="Terms and conditions.")
def quotation_create(
    customer: str,
    email: str,
    items: str,
    valid_until: datetime | None,
    taxes: tuple[str, ...],
    notes: str,
    terms: str,
) -> None:
    """Create a draft quotation."""
    rows = parse_rows(items, "sku")
    try:
        valid_days = settings.quotation_valid_days()
    except settings.ConfigurationError as exc:
        raise to_click_exception(exc)

    handler = CreateQuotationHandler(
        quotation_repo=quotation_repository(),
        product_repo=product_repository(),
        valid_days=valid_days,
        currency=settings.CURRENCY,
    )

    if valid_until is not None:
        # valid through the end of the given day
        valid_until = valid_until.replace(hour=23, minute=59, second=59, tzinfo=timezone.utc)

    try:
        dto = handler.handle(
            customer_name=customer,
            rows=rows,
            customer_email=email,
            valid_until=valid_until,
            taxes=parse_labelled(taxes, "tax"),
            notes=notes,
            terms=terms,
        )
    except DomainException as exc:
        raise to_click_exception(exc)

    _display_quotation(dto)


@click.command("show")
@click.argument("number")
def quotation_show(number: str) -> None:
    """Show details of an existing quotation."""
    handler = ShowQuotationHandler(quotation_repo=quotation_repository())

    try:
        dto = handler.handle(number)
    except DomainException as exc:
        raise to_click_exception(exc)

    _display_quotation(dto)


def _status_command(action: str, help_text: str) -> click.Command:
    @click.command(action, help=help_text)
    @click.argument("number")
    def command(number: str) -> None:
        handler = UpdateQuotationStatusHandler(quotation_repo=quotation_repository())
        try:
            dto = handler.handle(number, action)
        except DomainException as exc:
            raise to_click_exception(exc)
        click.echo(f"Quotation {dto.quotation_number} is now {dto.status}.")

    return command


quotation_send = _status_command("send", "Send a draft quotation to the customer.")
quotation_view = _status_command("view", "Record that the customer viewed the quotation.")
quotation_accept = _status_command("accept", "Record the customer's acceptance.")
quotation_reject = _status_command("reject", "Record the customer's rejection.")


@click.command("expire")
def quotation_expire() -> None:
    """Expire every open quotation past its validity date."""
    handler = ExpireQuotationsHandler(quotation_repo=quotation_repository())
    expired = handler.handle()

    if not expired:
        click.echo("No quotations to expire.")
        return
    for number in expired:
        click.echo(f"Quotation {number} expired.")


@click.command("check")
@click.argument("number")
def quotation_check(number: str) -> None:
    """Check stock availability for a quotation's items."""
    handler = CheckQuotationInventoryHandler(
        quotation_repo=quotation_repository(),
        product_repo=product_repository(),
    )

    try:
        report = handler.handle(number)
    except DomainException as exc:
        raise to_click_exception(exc)

    summary = report.summary
    click.echo(
        f"Total: {summary.total_items}  Available: {summary.available_items}  "
        f"Unavailable: {summary.unavailable_items}  Low stock: {summary.low_stock_items}"
    )
    click.echo()
    click.echo(f"  {'Product':<20} {'SKU':<12} {'Requested':>10} {'Available':>10} {'Status':<13}")
    click.echo(f"  {'-'*69}")
    for line in report.lines:
        click.echo(
            f"  {line.product_name:<20} {line.sku:<12} {line.requested_quantity:>10} "
            f"{line.available_quantity:>10} {line.status.value:<13}"
        )
    click.echo()

    if summary.unavailable_items:
        click.echo(f"{summary.unavailable_items} item(s) are not available:")
        for line in report.unavailable_lines:
            click.echo(
                f"  {line.product_name} - Need {line.requested_quantity}, "
                f"Available {line.available_quantity}"
            )
    elif summary.low_stock_items:
        click.echo(f"{summary.low_stock_items} item(s) are running low:")
        for line in report.low_stock_lines:
            click.echo(f"  {line.product_name} - Stock: {line.current_stock}, Min: {line.min_stock}")
    else:
        click.echo("All items are available in stock.")


@click.command("picking-list")
@click.argument("number")
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Also write the list as CSV.")
@click.option("--html", "html_path", type=click.Path(dir_okay=False, path_type=Path),
              default=None, help="Also write a printable HTML page.")
def quotation_picking_list(number: str, csv_path: Path | None, html_path: Path | None) -> None:
    """Generate a picking list for a fully available quotation."""
    try:
        pick_time = settings.pick_time()
    except settings.ConfigurationError as exc:
        raise to_click_exception(exc)

    handler = GeneratePickingListHandler(
        quotation_repo=quotation_repository(),
        product_repo=product_repository(),
        pick_time=pick_time,
    )

    try:
        picking_list = handler.handle(number)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(
        f"Picking list for {number}: {picking_list.total_items} item(s), "
        f"~{picking_list.estimated_pick_minutes} min"
    )
    click.echo(f"  {'Location':<14} {'Product':<20} {'SKU':<12} {'Qty':>5} {'Priority':<8}")
    click.echo(f"  {'-'*63}")
    for item in picking_list.items:
        click.echo(
            f"  {item.location_code:<14} {item.product_name:<20} {item.sku:<12} "
            f"{item.quantity:>5} {item.priority.value:<8}"
        )

    if csv_path is not None:
        csv_path.write_text(to_csv(picking_list), encoding="utf-8")
        click.echo(f"CSV written to {csv_path}")
    if html_path is not None:
        html_path.write_text(
            to_html(picking_list, title=f"Picking List {number}"), encoding="utf-8"
        )
        click.echo(f"HTML written to {html_path}")


@click.command("convert")
@click.argument("number")
def quotation_convert(number: str) -> None:
    """Convert an accepted quotation into an order."""
    handler = ConvertQuotationHandler(
        quotation_repo=quotation_repository(),
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(number)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Quotation {number} converted to order {dto.order_number}.")
