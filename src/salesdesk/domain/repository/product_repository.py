"""Abstract repository for the StockRecord aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  A product repository is also the stock and location
lookup the domain services consume.
"""

from __future__ import annotations

from abc import abstractmethod

from salesdesk.domain.model.inventory import BinLocation, StockLevel, StockRecord
from salesdesk.domain.repository.lookups import LocationLookup, StockLookup


class ProductRepository(StockLookup, LocationLookup):

    @abstractmethod
    def get_by_id(self, product_id: str) -> StockRecord | None:
        """Return a product's stock record by its ID, or None if not found."""

    @abstractmethod
    def get_by_sku(self, sku: str) -> StockRecord | None:
        """Return a product's stock record by SKU, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[StockRecord]:
        """Return every stock record."""

    @abstractmethod
    def save(self, record: StockRecord) -> None:
        """Persist a new or updated stock record."""

    # --- Lookup ports ---------------------------------------------------------

    def lookup_stock(self, product_id: str) -> StockLevel | None:
        record = self.get_by_id(product_id)
        return record.stock_level if record else None

    def lookup_location(self, product_id: str) -> BinLocation | None:
        record = self.get_by_id(product_id)
        return record.location if record else None
