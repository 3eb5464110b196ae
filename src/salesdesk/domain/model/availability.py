"""Availability check results.

An availability check reconciles requested quantities against current
stock before fulfillment.  The result is derived and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AvailabilityStatus(Enum):
    AVAILABLE = "available"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


@dataclass(frozen=True)
class AvailabilityRequest:
    product_id: str
    quantity: int
    product_name: str = ""
    sku: str = ""


@dataclass(frozen=True)
class InventoryAvailabilityLine:
    """One requested product reconciled against its stock record.

    Invariant: ``is_available == (available_quantity >= requested_quantity)``.
    ``found`` is False when the stock lookup knew nothing about the
    product; such lines are reported unavailable with zero stock.
    """

    product_id: str
    product_name: str
    sku: str
    requested_quantity: int
    current_stock: int
    available_quantity: int
    min_stock: int
    is_available: bool
    is_low_stock: bool
    needs_reorder: bool
    found: bool = True

    @property
    def shortfall(self) -> int:
        return max(self.requested_quantity - self.available_quantity, 0)

    @property
    def status(self) -> AvailabilityStatus:
        # unavailability dominates low stock
        if not self.is_available:
            return AvailabilityStatus.OUT_OF_STOCK
        if self.is_low_stock:
            return AvailabilityStatus.LOW_STOCK
        return AvailabilityStatus.AVAILABLE


@dataclass(frozen=True)
class InventoryCheckSummary:
    """Counts over the lines of one check.

    ``available_items + unavailable_items == total_items``; low-stock items
    are an annotation on the available ones, not a third bucket.
    """

    total_items: int
    available_items: int
    unavailable_items: int
    low_stock_items: int

    @property
    def can_fulfill(self) -> bool:
        return self.unavailable_items == 0

    @staticmethod
    def of(lines: list[InventoryAvailabilityLine]) -> InventoryCheckSummary:
        available = sum(1 for line in lines if line.is_available)
        return InventoryCheckSummary(
            total_items=len(lines),
            available_items=available,
            unavailable_items=len(lines) - available,
            low_stock_items=sum(1 for line in lines if line.needs_reorder),
        )


@dataclass(frozen=True)
class AvailabilityReport:
    lines: tuple[InventoryAvailabilityLine, ...]
    summary: InventoryCheckSummary

    @property
    def unavailable_lines(self) -> list[InventoryAvailabilityLine]:
        return [line for line in self.lines if not line.is_available]

    @property
    def low_stock_lines(self) -> list[InventoryAvailabilityLine]:
        return [line for line in self.lines if line.needs_reorder]
