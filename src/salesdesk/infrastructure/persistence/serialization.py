"""Raw-dict conversions shared by the JSON repositories."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from salesdesk.domain.model.pricing import DocumentTax, LineItem
from salesdesk.domain.model.value_objects import Money, Percentage, Quantity


def line_item_to_raw(item: LineItem) -> dict:
    return {
        "product_id": item.product_id,
        "name": item.name,
        "quantity": item.quantity.value,
        "unit_price": str(item.unit_price.amount),
        "currency": item.unit_price.currency,
        "discount": str(item.discount_percent.value),
        "tax_rate": str(item.tax_rate_percent.value),
    }


def line_item_from_raw(raw: dict) -> LineItem:
    return LineItem(
        name=raw["name"],
        quantity=Quantity(raw["quantity"]),
        unit_price=Money(Decimal(raw["unit_price"]), raw.get("currency", "USD")),
        discount_percent=Percentage(Decimal(raw.get("discount", "0"))),
        tax_rate_percent=Percentage(Decimal(raw.get("tax_rate", "0"))),
        product_id=raw.get("product_id"),
    )


def datetime_to_raw(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def datetime_from_raw(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def document_tax_to_raw(tax: DocumentTax) -> dict:
    return {"name": tax.name, "rate": str(tax.rate.value)}


def document_tax_from_raw(raw: dict) -> DocumentTax:
    return DocumentTax(raw["name"], Percentage(Decimal(raw["rate"])))
