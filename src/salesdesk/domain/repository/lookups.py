"""Lookup ports the availability checker and picking list generator read.

Both are injected explicitly; the core never reaches for a global store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from salesdesk.domain.model.inventory import BinLocation, StockLevel


class StockLookup(ABC):

    @abstractmethod
    def lookup_stock(self, product_id: str) -> StockLevel | None:
        """Return current and minimum stock for a product, or None if unknown."""


class LocationLookup(ABC):

    @abstractmethod
    def lookup_location(self, product_id: str) -> BinLocation | None:
        """Return the bin a product is stored in, or None if unassigned."""
