"""Application services: Order status, payment and warehouse use cases."""

from __future__ import annotations

import logging

from salesdesk.domain.exceptions import EntityNotFoundError, ValidationError
from salesdesk.domain.model.order import Order, OrderStatus, PaymentStatus
from salesdesk.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


def _load(order_repo: OrderRepository, order_number: str) -> Order:
    order = order_repo.get_by_number(order_number)
    if order is None:
        raise EntityNotFoundError(f"Order {order_number} not found")
    return order


class UpdateOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_number: str, status: str, notes: str = "") -> None:
        try:
            new_status = OrderStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown order status '{status}'")

        order = _load(self._order_repo, order_number)
        previous = order.status
        order.update_status(new_status, notes=notes)
        self._order_repo.save(order)
        logger.info(
            "Order %s: %s -> %s", order_number, previous.value, new_status.value
        )


class UpdatePaymentStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_number: str, payment_status: str) -> None:
        try:
            new_status = PaymentStatus(payment_status)
        except ValueError:
            raise ValidationError(f"Unknown payment status '{payment_status}'")

        order = _load(self._order_repo, order_number)
        order.update_payment_status(new_status)
        self._order_repo.save(order)


class AssignWarehouseHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_number: str, warehouse: str) -> None:
        order = _load(self._order_repo, order_number)
        order.assign_warehouse(warehouse)
        self._order_repo.save(order)
        logger.info("Order %s assigned to warehouse %s", order_number, order.warehouse)
