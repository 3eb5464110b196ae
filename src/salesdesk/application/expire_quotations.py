"""Application service: Expire Quotations use case.

Sweeps every non-terminal quotation whose validity date has passed.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from salesdesk.domain.repository.quotation_repository import QuotationRepository

logger = logging.getLogger(__name__)


class ExpireQuotationsHandler:

    def __init__(self, quotation_repo: QuotationRepository) -> None:
        self._quotation_repo = quotation_repo

    def handle(self, now: datetime | None = None) -> list[str]:
        """Expire overdue quotations and return their numbers."""
        now = now or datetime.now(timezone.utc)
        expired: list[str] = []
        for quotation in self._quotation_repo.list_all():
            if quotation.is_terminal or not quotation.is_past_validity(now):
                continue
            quotation.expire(now)
            self._quotation_repo.save(quotation)
            expired.append(quotation.quotation_number)

        if expired:
            logger.info("Expired %d quotation(s): %s", len(expired), ", ".join(expired))
        return expired
