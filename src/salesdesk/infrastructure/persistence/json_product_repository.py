"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from salesdesk.domain.model.inventory import BinLocation, StockRecord
from salesdesk.domain.model.value_objects import Money
from salesdesk.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, currency: str = "USD") -> None:
        self._file_path = file_path
        self._currency = currency
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> StockRecord | None:
        return self._load().get(product_id)

    def get_by_sku(self, sku: str) -> StockRecord | None:
        for record in self._load().values():
            if record.sku.lower() == sku.lower():
                return record
        return None

    def list_all(self) -> list[StockRecord]:
        return list(self._load().values())

    def save(self, record: StockRecord) -> None:
        records = self._load()
        records[record.product_id] = record
        self._persist(records)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, StockRecord]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["product_id"]: self._to_domain(item) for item in raw}

    def _to_domain(self, raw: dict) -> StockRecord:
        location = raw.get("location")
        return StockRecord(
            product_id=raw["product_id"],
            product_name=raw["product_name"],
            sku=raw["sku"],
            current_stock=raw.get("current_stock", 0),
            min_stock=raw.get("min_stock", 0),
            location=BinLocation(**location) if location else None,
            price=Money(Decimal(raw.get("price", "0")), raw.get("currency", self._currency)),
        )

    @staticmethod
    def _to_raw(record: StockRecord) -> dict:
        location = record.location
        return {
            "product_id": record.product_id,
            "product_name": record.product_name,
            "sku": record.sku,
            "current_stock": record.current_stock,
            "min_stock": record.min_stock,
            "location": (
                {
                    "zone": location.zone,
                    "aisle": location.aisle,
                    "shelf": location.shelf,
                    "bin": location.bin,
                }
                if location
                else None
            ),
            "price": str(record.price.amount),
            "currency": record.price.currency,
        }

    def _persist(self, records: dict[str, StockRecord]) -> None:
        raw = [self._to_raw(r) for r in records.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
