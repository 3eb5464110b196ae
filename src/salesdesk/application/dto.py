"""Data Transfer Objects — plain containers that cross layer boundaries.

Monetary values are rounded to cents here and nowhere earlier; the
domain keeps full precision.
"""

from __future__ import annotations

from dataclasses import dataclass

from salesdesk.domain.model.order import Order
from salesdesk.domain.model.pricing import PriceCalculation
from salesdesk.domain.model.quotation import Quotation


@dataclass(frozen=True)
class LineBreakdownDTO:
    """Output: one priced line as displayed to the user."""

    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    discount: str
    tax: str
    line_total: str


@dataclass(frozen=True)
class PriceCalculationDTO:
    subtotal: str
    total_discount: str
    total_tax: str
    shipping_cost: str
    grand_total: str
    lines: list[LineBreakdownDTO]


@dataclass(frozen=True)
class QuotationDTO:
    quotation_number: str
    customer_name: str
    status: str
    valid_until: str
    created_at: str
    totals: PriceCalculationDTO
    converted_to_order: str | None = None


@dataclass(frozen=True)
class OrderDTO:
    order_number: str
    customer_name: str
    status: str
    payment_status: str
    fulfillment_status: str
    warehouse: str | None
    quotation_number: str | None
    created_at: str
    totals: PriceCalculationDTO


# --- Mapping ------------------------------------------------------------------


def price_calculation_to_dto(calc: PriceCalculation) -> PriceCalculationDTO:
    return PriceCalculationDTO(
        subtotal=str(calc.subtotal),
        total_discount=str(calc.total_discount),
        total_tax=str(calc.total_tax),
        shipping_cost=str(calc.shipping_cost),
        grand_total=str(calc.grand_total),
        lines=[
            LineBreakdownDTO(
                name=line.name,
                quantity=line.quantity,
                unit_price=str(line.unit_price),
                discount=str(line.line_discount),
                tax=str(line.line_tax),
                line_total=str(line.line_total),
            )
            for line in calc.breakdown
        ],
    )


def quotation_to_dto(quotation: Quotation) -> QuotationDTO:
    return QuotationDTO(
        quotation_number=quotation.quotation_number,
        customer_name=quotation.customer_name,
        status=quotation.status.value,
        valid_until=quotation.valid_until.strftime("%Y-%m-%d"),
        created_at=quotation.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        totals=price_calculation_to_dto(quotation.totals),
        converted_to_order=quotation.converted_to_order,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        order_number=order.order_number,
        customer_name=order.customer_name,
        status=order.status.value,
        payment_status=order.payment_status.value,
        fulfillment_status=order.fulfillment_status.value,
        warehouse=order.warehouse,
        quotation_number=order.quotation_number,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        totals=price_calculation_to_dto(order.totals),
    )
