"""Domain service: Picking List Generator.

Turns a passed availability check into pick instructions, ordered by
warehouse location so a picker walks zone by zone, aisle by aisle.
The ordering is a plain lexicographic sort, not a route optimisation.

Callers must only pass a report with zero unavailable items.  The
generator does not re-check availability; an over-requested line that
slips through still gets HIGH priority.
"""

from __future__ import annotations

import logging

from salesdesk.domain.model.availability import AvailabilityReport, InventoryAvailabilityLine
from salesdesk.domain.model.picking import (
    PickingList,
    PickingListItem,
    PickPriority,
    PickTimeConfig,
)
from salesdesk.domain.repository.lookups import LocationLookup

logger = logging.getLogger(__name__)


def assign_priority(line: InventoryAvailabilityLine) -> PickPriority:
    """First match wins: short stock, then low stock, else normal."""
    if line.requested_quantity > line.available_quantity:
        return PickPriority.HIGH
    if line.is_low_stock:
        return PickPriority.HIGH
    return PickPriority.NORMAL


def _pick_order(item: PickingListItem) -> tuple:
    # items without a bin go last, alphabetically
    if item.location is None:
        return (1, ("", "", "", ""), item.product_name)
    return (0, item.location.sort_key, item.product_name)


class PickingListGenerator:

    def __init__(
        self,
        location_lookup: LocationLookup,
        config: PickTimeConfig | None = None,
    ) -> None:
        self._location_lookup = location_lookup
        self._config = config or PickTimeConfig()

    def generate(self, report: AvailabilityReport) -> PickingList:
        items = [
            PickingListItem(
                product_id=line.product_id,
                product_name=line.product_name,
                sku=line.sku,
                quantity=line.requested_quantity,
                location=self._location_lookup.lookup_location(line.product_id),
                priority=assign_priority(line),
            )
            for line in report.lines
        ]
        items.sort(key=_pick_order)

        seconds = sum(self._config.seconds_for(item.quantity) for item in items)

        unlocated = sum(1 for item in items if item.location is None)
        if unlocated:
            logger.warning("%d picking list item(s) have no bin location", unlocated)
        logger.info(
            "Generated picking list: %d items, estimated %d seconds",
            len(items),
            seconds,
        )
        return PickingList(items=tuple(items), estimated_pick_seconds=seconds)
