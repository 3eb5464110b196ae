import click

from salesdesk.infrastructure.cli.inventory_commands import inventory_set, inventory_show
from salesdesk.infrastructure.cli.order_commands import (
    order_assign_warehouse,
    order_payment,
    order_show,
    order_status,
)
from salesdesk.infrastructure.cli.price_commands import price
from salesdesk.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_update,
)
from salesdesk.infrastructure.cli.quotation_commands import (
    quotation_accept,
    quotation_check,
    quotation_convert,
    quotation_create,
    quotation_expire,
    quotation_picking_list,
    quotation_reject,
    quotation_send,
    quotation_show,
    quotation_view,
)
from salesdesk.infrastructure.logger import setup_logger


@click.group()
def cli() -> None:
    """SalesDesk — quotations, stock checks and picking lists"""
    setup_logger("salesdesk")


@cli.group()
def quotation() -> None:
    """Manage quotations."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def inventory() -> None:
    """Manage inventory."""


# Register subcommands
cli.add_command(price)
quotation.add_command(quotation_accept)
quotation.add_command(quotation_check)
quotation.add_command(quotation_convert)
quotation.add_command(quotation_create)
quotation.add_command(quotation_expire)
quotation.add_command(quotation_picking_list)
quotation.add_command(quotation_reject)
quotation.add_command(quotation_send)
quotation.add_command(quotation_show)
quotation.add_command(quotation_view)
order.add_command(order_assign_warehouse)
order.add_command(order_payment)
order.add_command(order_show)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
