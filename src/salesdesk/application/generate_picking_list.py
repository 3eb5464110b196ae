"""Application service: Generate Picking List use case.

Runs the availability check and only hands the result to the picking
list generator when nothing is unavailable.
"""

from __future__ import annotations

import logging

from salesdesk.application.check_inventory import availability_requests
from salesdesk.domain.exceptions import EntityNotFoundError, ValidationError
from salesdesk.domain.model.picking import PickingList, PickTimeConfig
from salesdesk.domain.repository.product_repository import ProductRepository
from salesdesk.domain.repository.quotation_repository import QuotationRepository
from salesdesk.domain.service.availability_checker import InventoryAvailabilityChecker
from salesdesk.domain.service.picking_list_generator import PickingListGenerator

logger = logging.getLogger(__name__)


class GeneratePickingListHandler:

    def __init__(
        self,
        quotation_repo: QuotationRepository,
        product_repo: ProductRepository,
        pick_time: PickTimeConfig | None = None,
    ) -> None:
        self._quotation_repo = quotation_repo
        self._product_repo = product_repo
        self._pick_time = pick_time or PickTimeConfig()

    def handle(self, quotation_number: str) -> PickingList:
        quotation = self._quotation_repo.get_by_number(quotation_number)
        if quotation is None:
            raise EntityNotFoundError(f"Quotation {quotation_number} not found")

        checker = InventoryAvailabilityChecker(self._product_repo)
        report = checker.check(availability_requests(quotation, self._product_repo))
        if not report.summary.can_fulfill:
            short = ", ".join(
                f"{line.product_name} (need {line.requested_quantity}, "
                f"have {line.available_quantity}, short {line.shortfall})"
                for line in report.unavailable_lines
            )
            raise ValidationError(
                f"Cannot generate picking list for {quotation_number}: "
                f"{report.summary.unavailable_items} item(s) unavailable: {short}"
            )

        generator = PickingListGenerator(self._product_repo, self._pick_time)
        return generator.generate(report)
