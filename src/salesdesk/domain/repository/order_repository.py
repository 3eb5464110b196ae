"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from salesdesk.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def count(self) -> int:
        """Return how many orders exist (drives number generation)."""

    @abstractmethod
    def get_by_number(self, order_number: str) -> Order | None:
        """Return an order by its number, or None if not found."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order."""
