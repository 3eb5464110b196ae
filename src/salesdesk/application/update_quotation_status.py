"""Application service: Send / View / Accept / Reject Quotation use cases.

Each action maps onto one Quotation transition; the aggregate rejects
anything its workflow does not allow.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from salesdesk.application.dto import QuotationDTO, quotation_to_dto
from salesdesk.domain.exceptions import EntityNotFoundError, ValidationError
from salesdesk.domain.repository.quotation_repository import QuotationRepository

logger = logging.getLogger(__name__)

ACTIONS = ("send", "view", "accept", "reject")


class UpdateQuotationStatusHandler:

    def __init__(self, quotation_repo: QuotationRepository) -> None:
        self._quotation_repo = quotation_repo

    def handle(
        self,
        quotation_number: str,
        action: str,
        now: datetime | None = None,
    ) -> QuotationDTO:
        if action not in ACTIONS:
            raise ValidationError(
                f"Unknown quotation action '{action}'. Expected one of: {', '.join(ACTIONS)}"
            )

        quotation = self._quotation_repo.get_by_number(quotation_number)
        if quotation is None:
            raise EntityNotFoundError(f"Quotation {quotation_number} not found")

        now = now or datetime.now(timezone.utc)
        previous = quotation.status
        transitions = {
            "send": quotation.send,
            "view": quotation.mark_viewed,
            "accept": quotation.accept,
            "reject": quotation.reject,
        }
        transitions[action](now)

        self._quotation_repo.save(quotation)
        logger.info(
            "Quotation %s: %s -> %s",
            quotation_number,
            previous.value,
            quotation.status.value,
        )
        return quotation_to_dto(quotation)
