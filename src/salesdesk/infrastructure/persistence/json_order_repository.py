"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from salesdesk.domain.model.order import (
    FulfillmentStatus,
    Order,
    OrderStatus,
    PaymentStatus,
    StatusChange,
)
from salesdesk.domain.model.pricing import Shipping
from salesdesk.domain.model.value_objects import Money
from salesdesk.domain.repository.order_repository import OrderRepository
from salesdesk.infrastructure.persistence.serialization import (
    datetime_from_raw,
    document_tax_from_raw,
    document_tax_to_raw,
    line_item_from_raw,
    line_item_to_raw,
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def count(self) -> int:
        return len(self._load_raw())

    def get_by_number(self, order_number: str) -> Order | None:
        for raw in self._load_raw():
            if raw["order_number"] == order_number:
                return self._to_domain(raw)
        return None

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["order_number"] == order.order_number:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "order_number": order.order_number,
            "customer_name": order.customer_name,
            "status": order.status.value,
            "payment_status": order.payment_status.value,
            "fulfillment_status": order.fulfillment_status.value,
            "warehouse": order.warehouse,
            "source": order.source,
            "quotation_number": order.quotation_number,
            "created_at": order.created_at.isoformat(),
            "shipping": (
                {
                    "cost": str(order.shipping.cost.amount),
                    "currency": order.shipping.cost.currency,
                    "method": order.shipping.method,
                }
                if order.shipping
                else None
            ),
            "items": [line_item_to_raw(item) for item in order.items],
            "taxes": [document_tax_to_raw(tax) for tax in order.taxes],
            "status_history": [
                {
                    "status": change.status.value,
                    "changed_at": change.changed_at.isoformat(),
                    "notes": change.notes,
                }
                for change in order.status_history
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        shipping = raw.get("shipping")
        return Order(
            order_number=raw["order_number"],
            customer_name=raw["customer_name"],
            items=[line_item_from_raw(i) for i in raw["items"]],
            taxes=[document_tax_from_raw(t) for t in raw.get("taxes", [])],
            status=OrderStatus(raw["status"]),
            payment_status=PaymentStatus(raw.get("payment_status", "pending")),
            fulfillment_status=FulfillmentStatus(
                raw.get("fulfillment_status", "unfulfilled")
            ),
            shipping=(
                Shipping(
                    Money(Decimal(shipping["cost"]), shipping.get("currency", "USD")),
                    shipping.get("method"),
                )
                if shipping
                else None
            ),
            warehouse=raw.get("warehouse"),
            source=raw.get("source", "pos"),
            quotation_number=raw.get("quotation_number"),
            created_at=datetime_from_raw(raw["created_at"]),
            status_history=[
                StatusChange(
                    status=OrderStatus(c["status"]),
                    changed_at=datetime_from_raw(c["changed_at"]),
                    notes=c.get("notes", ""),
                )
                for c in raw.get("status_history", [])
            ],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
