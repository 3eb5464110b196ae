"""Stock records and warehouse bin locations.

Each product has one StockRecord holding what is on hand, the reorder
threshold, and where in the warehouse it is stored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from salesdesk.domain.exceptions import ValidationError
from salesdesk.domain.model.value_objects import Money


class StockStatus(Enum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"


@dataclass(frozen=True)
class BinLocation:
    """Zone / aisle / shelf / bin address of a product in a warehouse."""

    zone: str
    aisle: str
    shelf: str
    bin: str

    def __post_init__(self) -> None:
        for part in ("zone", "aisle", "shelf", "bin"):
            if not str(getattr(self, part)).strip():
                raise ValidationError(f"Location {part} is required")

    @property
    def code(self) -> str:
        return f"{self.zone}-{self.aisle}-{self.shelf}-{self.bin}"

    @property
    def sort_key(self) -> tuple[str, str, str, str]:
        return (self.zone, self.aisle, self.shelf, self.bin)

    @staticmethod
    def parse(code: str) -> BinLocation:
        """Parse ``'A-01-02-03'`` into a BinLocation."""
        parts = [p.strip() for p in code.split("-")]
        if len(parts) != 4:
            raise ValidationError(
                f"Invalid location '{code}'. Expected 'Zone-Aisle-Shelf-Bin'."
            )
        return BinLocation(*parts)

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class StockLevel:
    """What the stock lookup reports for a product."""

    current_stock: int
    min_stock: int = 0


@dataclass
class StockRecord:
    """Aggregate root for stock tracking.

    Invariants:
    - ``current_stock`` and ``min_stock`` are never negative
    """

    product_id: str
    product_name: str
    sku: str
    current_stock: int = 0
    min_stock: int = 0
    location: BinLocation | None = None
    price: Money = field(default_factory=Money.zero)

    def __post_init__(self) -> None:
        if self.current_stock < 0:
            raise ValidationError("Stock cannot be negative")
        if self.min_stock < 0:
            raise ValidationError("Minimum stock cannot be negative")

    @property
    def stock_level(self) -> StockLevel:
        return StockLevel(current_stock=self.current_stock, min_stock=self.min_stock)

    @property
    def stock_status(self) -> StockStatus:
        if self.current_stock == 0:
            return StockStatus.OUT_OF_STOCK
        if self.current_stock <= self.min_stock:
            return StockStatus.LOW_STOCK
        return StockStatus.IN_STOCK

    def update_price(self, new_price: Money) -> None:
        """Change the selling price.

        Existing quotations and orders keep the price they captured.
        """
        self.price = new_price

    def set_levels(self, current_stock: int, min_stock: int | None = None) -> None:
        if current_stock < 0:
            raise ValidationError("Stock cannot be negative")
        if min_stock is not None:
            if min_stock < 0:
                raise ValidationError("Minimum stock cannot be negative")
            self.min_stock = min_stock
        self.current_stock = current_stock
