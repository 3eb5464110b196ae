"""Application service: Add Product use case."""

from __future__ import annotations

from salesdesk.domain.exceptions import ValidationError
from salesdesk.domain.model.inventory import BinLocation, StockRecord
from salesdesk.domain.model.value_objects import Money
from salesdesk.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, currency: str = "USD") -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(
        self,
        name: str,
        sku: str,
        price: str,
        current_stock: int = 0,
        min_stock: int = 0,
        location: str | None = None,
    ) -> StockRecord:
        """Add a new product to the catalog with its opening stock."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not sku or not sku.strip():
            raise ValidationError("SKU is required")

        if self._product_repo.get_by_sku(sku.strip()) is not None:
            raise ValidationError(f"SKU '{sku}' already exists")

        # Auto-assign ID based on existing products
        all_products = self._product_repo.list_all()
        if all_products:
            next_id = str(max(int(p.product_id) for p in all_products) + 1)
        else:
            next_id = "1"

        record = StockRecord(
            product_id=next_id,
            product_name=name.strip(),
            sku=sku.strip(),
            current_stock=current_stock,
            min_stock=min_stock,
            location=BinLocation.parse(location) if location else None,
            price=Money.of(price, self._currency),
        )
        self._product_repo.save(record)
        return record
