"""Application service: Show Quotation use case (query)."""

from __future__ import annotations

from salesdesk.application.dto import QuotationDTO, quotation_to_dto
from salesdesk.domain.exceptions import EntityNotFoundError
from salesdesk.domain.repository.quotation_repository import QuotationRepository


class ShowQuotationHandler:

    def __init__(self, quotation_repo: QuotationRepository) -> None:
        self._quotation_repo = quotation_repo

    def handle(self, quotation_number: str) -> QuotationDTO:
        quotation = self._quotation_repo.get_by_number(quotation_number)
        if quotation is None:
            raise EntityNotFoundError(f"Quotation {quotation_number} not found")
        return quotation_to_dto(quotation)
