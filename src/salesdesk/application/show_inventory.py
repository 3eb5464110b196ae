"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from salesdesk.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class InventoryLineDTO:
    sku: str
    product_name: str
    current: int
    minimum: int
    location: str
    status: str
    price: str


class ShowInventoryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, low_stock_only: bool = False) -> list[InventoryLineDTO]:
        records = self._product_repo.list_all()
        if low_stock_only:
            records = [r for r in records if r.current_stock <= r.min_stock]
        return [
            InventoryLineDTO(
                sku=r.sku,
                product_name=r.product_name,
                current=r.current_stock,
                minimum=r.min_stock,
                location=r.location.code if r.location else "-",
                status=r.stock_status.value,
                price=str(r.price),
            )
            for r in records
        ]
