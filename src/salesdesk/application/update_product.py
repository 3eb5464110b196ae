"""Application service: Update Product Price use case."""

from __future__ import annotations

from salesdesk.domain.exceptions import EntityNotFoundError
from salesdesk.domain.model.value_objects import Money
from salesdesk.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository, currency: str = "USD") -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(self, sku: str, new_price: str) -> None:
        """Update a product's price.

        Quotations and orders already created keep their line prices.
        """
        record = self._product_repo.get_by_sku(sku)
        if record is None:
            raise EntityNotFoundError(f"Product with SKU '{sku}' not found")

        record.update_price(Money.of(new_price, self._currency))
        self._product_repo.save(record)
