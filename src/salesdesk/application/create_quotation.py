"""Application service: Create Quotation use case.

Resolves product references, validates every line, and lets the
Quotation aggregate enforce its own rules before persisting a draft.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

from salesdesk.application.dto import QuotationDTO, quotation_to_dto
from salesdesk.domain.exceptions import EntityNotFoundError
from salesdesk.domain.model.pricing import DocumentTax
from salesdesk.domain.model.quotation import Quotation
from salesdesk.domain.model.value_objects import Percentage
from salesdesk.domain.repository.product_repository import ProductRepository
from salesdesk.domain.repository.quotation_repository import QuotationRepository
from salesdesk.domain.service.numbering import (
    QUOTATION_PREFIX,
    allocate_document_number,
)
from salesdesk.domain.service.pricing_engine import validate_line_items

logger = logging.getLogger(__name__)


class CreateQuotationHandler:

    def __init__(
        self,
        quotation_repo: QuotationRepository,
        product_repo: ProductRepository,
        valid_days: int = 30,
        currency: str = "USD",
    ) -> None:
        self._quotation_repo = quotation_repo
        self._product_repo = product_repo
        self._valid_days = valid_days
        self._currency = currency

    def handle(
        self,
        customer_name: str,
        rows: list[Mapping[str, Any]],
        customer_email: str = "",
        valid_until: datetime | None = None,
        taxes: dict[str, str] | None = None,
        notes: str = "",
        terms: str = "",
        now: datetime | None = None,
    ) -> QuotationDTO:
        """Create a draft quotation.

        Steps:
        1. Resolve each row's SKU to a product (fail if not found), filling
           in the product id and, when absent, the name.
        2. Validate all rows into line items.
        3. Let the Quotation aggregate validate its business rules.
        4. Number, persist and return a DTO.
        """
        now = now or datetime.now(timezone.utc)
        resolved = [self._resolve_product(row) for row in rows]
        items = validate_line_items(resolved, currency=self._currency)

        quotation = Quotation.create(
            quotation_number=self._next_number(now),
            customer_name=customer_name,
            customer_email=customer_email,
            items=items,
            valid_until=valid_until or now + timedelta(days=self._valid_days),
            taxes=[DocumentTax(name, Percentage.of(rate)) for name, rate in (taxes or {}).items()],
            notes=notes,
            terms=terms,
            now=now,
        )
        self._quotation_repo.save(quotation)
        logger.info(
            "Created quotation %s for %s with %d item(s)",
            quotation.quotation_number,
            quotation.customer_name,
            len(quotation.items),
        )
        return quotation_to_dto(quotation)

    # --- Helpers --------------------------------------------------------------

    def _resolve_product(self, row: Mapping[str, Any]) -> dict[str, Any]:
        resolved = dict(row)
        sku = resolved.pop("sku", None)
        if not sku:
            return resolved
        record = self._product_repo.get_by_sku(str(sku))
        if record is None:
            raise EntityNotFoundError(f"Product not found: SKU '{sku}'")
        resolved["product_id"] = record.product_id
        if not resolved.get("name"):
            resolved["name"] = record.product_name
        if resolved.get("unit_price") in (None, ""):
            resolved["unit_price"] = str(record.price.amount)
        return resolved

    def _next_number(self, now: datetime) -> str:
        return allocate_document_number(
            QUOTATION_PREFIX,
            self._quotation_repo.count(),
            lambda number: self._quotation_repo.get_by_number(number) is not None,
            now,
        )
