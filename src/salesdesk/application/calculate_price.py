"""Application service: Calculate Price use case (live totals)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from salesdesk.application.dto import PriceCalculationDTO, price_calculation_to_dto
from salesdesk.domain.model.pricing import DocumentDiscount, DocumentTax, Shipping
from salesdesk.domain.model.value_objects import Money, Percentage
from salesdesk.domain.service.pricing_engine import calculate_price, validate_line_items


class CalculatePriceHandler:

    def __init__(self, currency: str = "USD") -> None:
        self._currency = currency

    def handle(
        self,
        rows: list[Mapping[str, Any]],
        shipping_cost: str = "0",
        discounts: dict[str, str] | None = None,
        taxes: dict[str, str] | None = None,
    ) -> PriceCalculationDTO:
        """Price raw line rows plus optional shipping, discounts and taxes.

        ``discounts`` maps a label to a fixed amount, ``taxes`` a label
        to a rate in percent.
        """
        items = validate_line_items(rows, currency=self._currency)
        calc = calculate_price(
            items,
            discounts=[
                DocumentDiscount(name, Money.of(amount, self._currency))
                for name, amount in (discounts or {}).items()
            ],
            taxes=[
                DocumentTax(name, Percentage.of(rate))
                for name, rate in (taxes or {}).items()
            ],
            shipping=Shipping(Money.of(shipping_cost, self._currency)),
            currency=self._currency,
        )
        return price_calculation_to_dto(calc)
