"""Pricing types: line items going in, price calculations coming out.

None of these are persisted on their own.  A quotation or order stores
its line items; every total is recomputed from them on demand.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from salesdesk.domain.model.value_objects import Money, Percentage, Quantity


@dataclass(frozen=True)
class LineItem:
    """One product/quantity/price row of a quotation, order or purchase order."""

    name: str
    quantity: Quantity
    unit_price: Money
    discount_percent: Percentage = field(default_factory=Percentage.zero)
    tax_rate_percent: Percentage = field(default_factory=Percentage.zero)
    product_id: str | None = None


@dataclass(frozen=True)
class DocumentDiscount:
    """A fixed discount applied to the whole document, after line discounts."""

    name: str
    amount: Money


@dataclass(frozen=True)
class DocumentTax:
    """A tax applied to the whole document's discounted subtotal."""

    name: str
    rate: Percentage


@dataclass(frozen=True)
class Shipping:
    cost: Money
    method: str | None = None


@dataclass(frozen=True)
class LineBreakdown:
    name: str
    quantity: int
    unit_price: Money
    line_subtotal: Money
    line_discount: Money
    line_taxable: Money
    line_tax: Money
    line_total: Money


@dataclass(frozen=True)
class PriceCalculation:
    """Result of pricing a list of line items.

    Invariant: ``grand_total == subtotal - total_discount + total_tax
    + shipping_cost`` (exact, amounts are unrounded Decimals).
    """

    subtotal: Money
    total_discount: Money
    total_tax: Money
    shipping_cost: Money
    grand_total: Money
    breakdown: tuple[LineBreakdown, ...] = ()
