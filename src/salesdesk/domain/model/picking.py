"""Picking list: ordered instructions for warehouse staff."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from salesdesk.domain.exceptions import ValidationError
from salesdesk.domain.model.inventory import BinLocation


class PickPriority(Enum):
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


@dataclass(frozen=True)
class PickTimeConfig:
    """Tunable pick-time estimate: a base per line plus a cost per extra unit."""

    base_seconds_per_item: int = 60
    seconds_per_additional_unit: int = 5

    def __post_init__(self) -> None:
        if self.base_seconds_per_item < 0 or self.seconds_per_additional_unit < 0:
            raise ValidationError("Pick time constants cannot be negative")

    def seconds_for(self, quantity: int) -> int:
        return self.base_seconds_per_item + self.seconds_per_additional_unit * max(
            quantity - 1, 0
        )


@dataclass(frozen=True)
class PickingListItem:
    product_id: str
    product_name: str
    sku: str
    quantity: int
    location: BinLocation | None
    priority: PickPriority

    @property
    def location_code(self) -> str:
        return self.location.code if self.location else "No Location"


@dataclass(frozen=True)
class PickingList:
    items: tuple[PickingListItem, ...]
    estimated_pick_seconds: int

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def total_units(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def estimated_pick_minutes(self) -> int:
        return math.ceil(self.estimated_pick_seconds / 60)
