"""Application service: Convert Quotation to Order use case.

Only accepted quotations convert, and only when every line passes the
availability check.  Stock is read, not reserved: two conversions racing
on the same product can both pass.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from salesdesk.application.check_inventory import availability_requests
from salesdesk.application.dto import OrderDTO, order_to_dto
from salesdesk.domain.exceptions import EntityNotFoundError, ValidationError
from salesdesk.domain.model.order import Order
from salesdesk.domain.model.quotation import QuotationStatus
from salesdesk.domain.repository.order_repository import OrderRepository
from salesdesk.domain.repository.product_repository import ProductRepository
from salesdesk.domain.repository.quotation_repository import QuotationRepository
from salesdesk.domain.service.availability_checker import InventoryAvailabilityChecker
from salesdesk.domain.service.numbering import ORDER_PREFIX, allocate_document_number

logger = logging.getLogger(__name__)


class ConvertQuotationHandler:

    def __init__(
        self,
        quotation_repo: QuotationRepository,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._quotation_repo = quotation_repo
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, quotation_number: str, now: datetime | None = None) -> OrderDTO:
        now = now or datetime.now(timezone.utc)

        quotation = self._quotation_repo.get_by_number(quotation_number)
        if quotation is None:
            raise EntityNotFoundError(f"Quotation {quotation_number} not found")

        if quotation.status == QuotationStatus.CONVERTED:
            raise ValidationError(f"Quotation {quotation_number} already converted")
        if quotation.status != QuotationStatus.ACCEPTED:
            raise ValidationError("Only accepted quotations can be converted to orders")

        # Availability gate before any mutation
        checker = InventoryAvailabilityChecker(self._product_repo)
        report = checker.check(availability_requests(quotation, self._product_repo))
        if not report.summary.can_fulfill:
            raise ValidationError(
                f"Cannot convert {quotation_number}: "
                f"{report.summary.unavailable_items} item(s) unavailable"
            )

        order_number = allocate_document_number(
            ORDER_PREFIX,
            self._order_repo.count(),
            lambda number: self._order_repo.get_by_number(number) is not None,
            now,
        )
        order = Order.from_quotation(order_number, quotation, now=now)
        quotation.convert(order_number, now)

        self._order_repo.save(order)
        self._quotation_repo.save(quotation)
        logger.info("Converted quotation %s to order %s", quotation_number, order_number)
        return order_to_dto(order)
