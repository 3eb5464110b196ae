"""Application service: Check Quotation Inventory use case (query)."""

from __future__ import annotations

from salesdesk.domain.exceptions import EntityNotFoundError
from salesdesk.domain.model.availability import AvailabilityReport, AvailabilityRequest
from salesdesk.domain.model.quotation import Quotation
from salesdesk.domain.repository.product_repository import ProductRepository
from salesdesk.domain.repository.quotation_repository import QuotationRepository
from salesdesk.domain.service.availability_checker import InventoryAvailabilityChecker


def availability_requests(
    quotation: Quotation, product_repo: ProductRepository
) -> list[AvailabilityRequest]:
    """Build check requests from a quotation's lines, with SKUs filled in."""
    requests: list[AvailabilityRequest] = []
    for item in quotation.items:
        product_id = item.product_id or f"unlinked:{item.name}"
        record = product_repo.get_by_id(product_id) if item.product_id else None
        requests.append(
            AvailabilityRequest(
                product_id=product_id,
                quantity=item.quantity.value,
                product_name=item.name,
                sku=record.sku if record else "",
            )
        )
    return requests


class CheckQuotationInventoryHandler:

    def __init__(
        self,
        quotation_repo: QuotationRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._quotation_repo = quotation_repo
        self._product_repo = product_repo

    def handle(self, quotation_number: str) -> AvailabilityReport:
        quotation = self._quotation_repo.get_by_number(quotation_number)
        if quotation is None:
            raise EntityNotFoundError(f"Quotation {quotation_number} not found")

        checker = InventoryAvailabilityChecker(self._product_repo)
        return checker.check(availability_requests(quotation, self._product_repo))
