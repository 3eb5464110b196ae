"""Abstract repository for the Quotation aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from salesdesk.domain.model.quotation import Quotation


class QuotationRepository(ABC):

    @abstractmethod
    def count(self) -> int:
        """Return how many quotations exist (drives number generation)."""

    @abstractmethod
    def get_by_number(self, quotation_number: str) -> Quotation | None:
        """Return a quotation by its number, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Quotation]:
        """Return every quotation."""

    @abstractmethod
    def save(self, quotation: Quotation) -> None:
        """Persist a new or updated quotation."""
