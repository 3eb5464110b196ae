"""Domain service: Pricing Engine.

Pure functions over line items.  Totals are accumulated at full Decimal
precision; nothing here rounds.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from salesdesk.domain.exceptions import FieldError, ValidationError
from salesdesk.domain.model.pricing import (
    DocumentDiscount,
    DocumentTax,
    LineBreakdown,
    LineItem,
    PriceCalculation,
    Shipping,
)
from salesdesk.domain.model.value_objects import Money, Percentage, Quantity


def price_line(item: LineItem) -> LineBreakdown:
    """Price a single line: subtotal, discount, taxable base, tax, total."""
    line_subtotal = item.unit_price * item.quantity.value
    line_discount = line_subtotal * item.discount_percent.fraction
    line_taxable = line_subtotal - line_discount
    line_tax = line_taxable * item.tax_rate_percent.fraction
    return LineBreakdown(
        name=item.name,
        quantity=item.quantity.value,
        unit_price=item.unit_price,
        line_subtotal=line_subtotal,
        line_discount=line_discount,
        line_taxable=line_taxable,
        line_tax=line_tax,
        line_total=line_taxable + line_tax,
    )


def calculate_price(
    items: Iterable[LineItem],
    discounts: Iterable[DocumentDiscount] = (),
    taxes: Iterable[DocumentTax] = (),
    shipping: Shipping | None = None,
    currency: str = "USD",
) -> PriceCalculation:
    """Compute subtotal, discounts, taxes, shipping and grand total.

    Document-level discounts are fixed amounts taken after line
    discounts; document-level taxes apply to the discounted subtotal.
    An empty item list prices to all zeros.
    """
    items = list(items)
    if items:
        currency = items[0].unit_price.currency

    breakdown = tuple(price_line(item) for item in items)

    subtotal = Money.zero(currency)
    total_discount = Money.zero(currency)
    total_tax = Money.zero(currency)
    for line in breakdown:
        subtotal = subtotal + line.line_subtotal
        total_discount = total_discount + line.line_discount
        total_tax = total_tax + line.line_tax

    for discount in discounts:
        total_discount = total_discount + discount.amount
    if total_discount > subtotal:
        raise ValidationError(
            f"Total discount {total_discount} exceeds subtotal {subtotal}"
        )

    discounted = subtotal - total_discount
    for tax in taxes:
        total_tax = total_tax + discounted * tax.rate.fraction

    shipping_cost = shipping.cost if shipping is not None else Money.zero(currency)

    return PriceCalculation(
        subtotal=subtotal,
        total_discount=total_discount,
        total_tax=total_tax,
        shipping_cost=shipping_cost,
        grand_total=discounted + total_tax + shipping_cost,
        breakdown=breakdown,
    )


# ---------------------------------------------------------------------------
# Payload validation
# ---------------------------------------------------------------------------


def _decimal_field(
    row: Mapping[str, Any],
    key: str,
    label: str,
    prefix: str,
    errors: list[FieldError],
    required: bool = True,
) -> Decimal | None:
    raw = row.get(key)
    if raw is None or raw == "":
        if required:
            errors.append(FieldError(f"{prefix}.{key}", f"{label} is required"))
        return None
    try:
        value = Decimal(str(raw))
    except (InvalidOperation, ValueError):
        errors.append(FieldError(f"{prefix}.{key}", f"{label} must be a number"))
        return None
    if not value.is_finite():
        errors.append(FieldError(f"{prefix}.{key}", f"{label} must be a number"))
        return None
    return value


def validate_line_items(
    rows: Iterable[Mapping[str, Any]],
    currency: str = "USD",
) -> list[LineItem]:
    """Turn untyped rows into LineItems, reporting every bad field at once.

    Recognised keys: ``name``, ``quantity``, ``unit_price``, ``discount``,
    ``tax_rate`` and ``product_id``.  Raises a ValidationError whose
    ``errors`` lists each problem as ``items[i].field: message``.
    """
    errors: list[FieldError] = []
    items: list[LineItem] = []

    for index, row in enumerate(rows):
        prefix = f"items[{index}]"
        row_errors: list[FieldError] = []

        name = str(row.get("name") or "").strip()
        if not name:
            row_errors.append(FieldError(f"{prefix}.name", "Name is required"))

        quantity = _decimal_field(row, "quantity", "Quantity", prefix, row_errors)
        if quantity is not None:
            if quantity != quantity.to_integral_value():
                row_errors.append(
                    FieldError(f"{prefix}.quantity", "Quantity must be a whole number")
                )
            elif quantity < 1:
                row_errors.append(
                    FieldError(f"{prefix}.quantity", "Quantity must be at least 1")
                )

        unit_price = _decimal_field(row, "unit_price", "Unit price", prefix, row_errors)
        if unit_price is not None and unit_price < 0:
            row_errors.append(
                FieldError(f"{prefix}.unit_price", "Unit price must be non-negative")
            )

        percents: dict[str, Decimal] = {}
        for key, label in (("discount", "Discount"), ("tax_rate", "Tax rate")):
            value = _decimal_field(row, key, label, prefix, row_errors, required=False)
            if value is None:
                continue
            if not Decimal("0") <= value <= Decimal("100"):
                row_errors.append(
                    FieldError(f"{prefix}.{key}", f"{label} must be between 0 and 100")
                )
            else:
                percents[key] = value

        if row_errors:
            errors.extend(row_errors)
            continue

        product_id = row.get("product_id")
        items.append(
            LineItem(
                name=name,
                quantity=Quantity(int(quantity)),
                unit_price=Money(unit_price, currency),
                discount_percent=Percentage(percents.get("discount", Decimal("0"))),
                tax_rate_percent=Percentage(percents.get("tax_rate", Decimal("0"))),
                product_id=str(product_id) if product_id else None,
            )
        )

    if errors:
        raise ValidationError.from_field_errors(errors)
    return items
