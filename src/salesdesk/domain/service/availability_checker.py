"""Domain service: Inventory Availability Checker.

Reconciles requested quantities against current stock and buckets each
line as available, low stock or unavailable.  The checker only reads
through the injected stock lookup; it never reserves or mutates stock.

An unknown product does not abort the batch: it is reported as
unavailable with zero stock so it shows up for manual review.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from salesdesk.domain.model.availability import (
    AvailabilityReport,
    AvailabilityRequest,
    InventoryAvailabilityLine,
    InventoryCheckSummary,
)
from salesdesk.domain.model.inventory import StockLevel
from salesdesk.domain.repository.lookups import StockLookup

logger = logging.getLogger(__name__)


def _merge_requests(requests: Iterable[AvailabilityRequest]) -> list[AvailabilityRequest]:
    """Sum quantities of repeated product ids, keeping first-seen order."""
    merged: dict[str, AvailabilityRequest] = {}
    for req in requests:
        existing = merged.get(req.product_id)
        if existing is None:
            merged[req.product_id] = req
        else:
            merged[req.product_id] = AvailabilityRequest(
                product_id=req.product_id,
                quantity=existing.quantity + req.quantity,
                product_name=existing.product_name or req.product_name,
                sku=existing.sku or req.sku,
            )
    return list(merged.values())


def evaluate_line(
    request: AvailabilityRequest, stock: StockLevel | None
) -> InventoryAvailabilityLine:
    """Classify one request against its stock level (None = unknown product)."""
    found = stock is not None
    current = stock.current_stock if stock else 0
    minimum = stock.min_stock if stock else 0

    available = max(current, 0)
    is_available = available >= request.quantity
    is_low_stock = current <= minimum

    return InventoryAvailabilityLine(
        product_id=request.product_id,
        product_name=request.product_name,
        sku=request.sku,
        requested_quantity=request.quantity,
        current_stock=current,
        available_quantity=available,
        min_stock=minimum,
        is_available=is_available,
        is_low_stock=is_low_stock,
        needs_reorder=is_low_stock and is_available,
        found=found,
    )


class InventoryAvailabilityChecker:

    def __init__(self, stock_lookup: StockLookup) -> None:
        self._stock_lookup = stock_lookup

    def check(self, requests: Iterable[AvailabilityRequest]) -> AvailabilityReport:
        lines: list[InventoryAvailabilityLine] = []

        for req in _merge_requests(requests):
            stock = self._stock_lookup.lookup_stock(req.product_id)
            if stock is None:
                logger.warning(
                    "No stock record for product %s (%s); treating as unavailable",
                    req.product_id,
                    req.product_name or "unnamed",
                )
            lines.append(evaluate_line(req, stock))

        summary = InventoryCheckSummary.of(lines)
        logger.info(
            "Availability check: %d items, %d available, %d unavailable, %d low stock",
            summary.total_items,
            summary.available_items,
            summary.unavailable_items,
            summary.low_stock_items,
        )
        return AvailabilityReport(lines=tuple(lines), summary=summary)

