"""Order aggregate — a sale being fulfilled.

The Order owns its line items (price snapshot from the quotation or
point of sale) and enforces its status workflow here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from salesdesk.domain.exceptions import InvalidTransitionError, ValidationError
from salesdesk.domain.model.pricing import DocumentTax, LineItem, PriceCalculation, Shipping
from salesdesk.domain.model.quotation import Quotation
from salesdesk.domain.service.pricing_engine import calculate_price


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    RETURNED = "returned"


class PaymentStatus(Enum):
    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"
    REFUNDED = "refunded"
    CANCELLED = "cancelled"


class FulfillmentStatus(Enum):
    UNFULFILLED = "unfulfilled"
    PARTIAL = "partial"
    FULFILLED = "fulfilled"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


_ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.RETURNED}),
    OrderStatus.DELIVERED: frozenset({OrderStatus.RETURNED}),
}

_FULFILLMENT_FOR_STATUS = {
    OrderStatus.SHIPPED: FulfillmentStatus.SHIPPED,
    OrderStatus.DELIVERED: FulfillmentStatus.DELIVERED,
    OrderStatus.CANCELLED: FulfillmentStatus.UNFULFILLED,
}

# Once goods have left, the warehouse can no longer be reassigned.
_WAREHOUSE_LOCKED = frozenset(
    {
        OrderStatus.SHIPPED,
        OrderStatus.DELIVERED,
        OrderStatus.CANCELLED,
        OrderStatus.RETURNED,
    }
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class StatusChange:
    status: OrderStatus
    changed_at: datetime
    notes: str = ""


@dataclass
class Order:
    """Aggregate root for customer orders.

    ``Order.create()`` and ``Order.from_quotation()`` enforce the rules for
    new orders; ``__init__`` is left plain for reconstitution.
    """

    order_number: str
    customer_name: str
    items: list[LineItem]
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    fulfillment_status: FulfillmentStatus = FulfillmentStatus.UNFULFILLED
    shipping: Shipping | None = None
    taxes: list[DocumentTax] = field(default_factory=list)
    warehouse: str | None = None
    source: str = "pos"
    quotation_number: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    status_history: list[StatusChange] = field(default_factory=list)

    # --- Factories (used for NEW orders only) ---------------------------------

    @staticmethod
    def create(
        order_number: str,
        customer_name: str,
        items: list[LineItem],
        shipping: Shipping | None = None,
        taxes: list[DocumentTax] | None = None,
        source: str = "pos",
        now: datetime | None = None,
    ) -> Order:
        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(
            order_number=order_number,
            customer_name=customer_name.strip(),
            items=list(items),
            shipping=shipping,
            taxes=list(taxes or []),
            source=source,
            created_at=now or _utcnow(),
        )

    @staticmethod
    def from_quotation(
        order_number: str,
        quotation: Quotation,
        now: datetime | None = None,
    ) -> Order:
        """Build a pending order carrying the quotation's price snapshot."""
        order = Order.create(
            order_number=order_number,
            customer_name=quotation.customer_name,
            items=quotation.items,
            taxes=quotation.taxes,
            source="quotation",
            now=now,
        )
        order.quotation_number = quotation.quotation_number
        return order

    # --- State transitions ----------------------------------------------------

    def update_status(
        self,
        new_status: OrderStatus,
        notes: str = "",
        now: datetime | None = None,
    ) -> None:
        """Move the order along its workflow and sync fulfillment status."""
        allowed = _ALLOWED_TRANSITIONS.get(self.status, frozenset())
        if new_status not in allowed:
            raise InvalidTransitionError(
                f"Cannot move order {self.order_number} from "
                f"{self.status.value} to {new_status.value}"
            )
        self.status = new_status
        if new_status in _FULFILLMENT_FOR_STATUS:
            self.fulfillment_status = _FULFILLMENT_FOR_STATUS[new_status]
        self.status_history.append(
            StatusChange(status=new_status, changed_at=now or _utcnow(), notes=notes)
        )

    def update_payment_status(self, payment_status: PaymentStatus) -> None:
        if self.status == OrderStatus.CANCELLED and payment_status not in (
            PaymentStatus.REFUNDED,
            PaymentStatus.CANCELLED,
        ):
            raise ValidationError(
                f"Order {self.order_number} is cancelled; payment can only be "
                f"refunded or cancelled"
            )
        self.payment_status = payment_status

    def assign_warehouse(self, warehouse: str) -> None:
        if not warehouse or not warehouse.strip():
            raise ValidationError("Warehouse is required")
        if self.status in _WAREHOUSE_LOCKED:
            raise ValidationError(
                f"Cannot assign a warehouse to order {self.order_number} "
                f"in {self.status.value} status"
            )
        self.warehouse = warehouse.strip()

    # --- Computed properties --------------------------------------------------

    @property
    def can_be_cancelled(self) -> bool:
        return OrderStatus.CANCELLED in _ALLOWED_TRANSITIONS.get(self.status, frozenset())

    @property
    def totals(self) -> PriceCalculation:
        return calculate_price(self.items, taxes=self.taxes, shipping=self.shipping)
