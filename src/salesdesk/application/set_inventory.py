"""Application service: Set Inventory use case."""

from __future__ import annotations

from salesdesk.domain.exceptions import EntityNotFoundError
from salesdesk.domain.model.inventory import BinLocation
from salesdesk.domain.repository.product_repository import ProductRepository


class SetInventoryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        sku: str,
        quantity: int,
        min_stock: int | None = None,
        location: str | None = None,
    ) -> None:
        """Set on-hand stock (and optionally reorder point and bin) for a product."""
        record = self._product_repo.get_by_sku(sku)
        if record is None:
            raise EntityNotFoundError(f"Product not found: SKU '{sku}'")

        record.set_levels(quantity, min_stock)
        if location is not None:
            record.location = BinLocation.parse(location)
        self._product_repo.save(record)
