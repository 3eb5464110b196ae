"""Quotation aggregate — a priced offer moving through a status workflow.

draft -> sent -> viewed -> accepted -> converted, with rejection from
sent/viewed and expiry from any non-terminal state once ``valid_until``
has passed.  Converting is terminal and hands over to Order creation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from salesdesk.domain.exceptions import InvalidTransitionError, ValidationError
from salesdesk.domain.model.pricing import DocumentTax, LineItem, PriceCalculation
from salesdesk.domain.service.pricing_engine import calculate_price


class QuotationStatus(Enum):
    DRAFT = "draft"
    SENT = "sent"
    VIEWED = "viewed"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXPIRED = "expired"
    CONVERTED = "converted"


TERMINAL_STATUSES = frozenset(
    {QuotationStatus.CONVERTED, QuotationStatus.REJECTED, QuotationStatus.EXPIRED}
)

_ALLOWED_TRANSITIONS: dict[QuotationStatus, frozenset[QuotationStatus]] = {
    QuotationStatus.DRAFT: frozenset({QuotationStatus.SENT, QuotationStatus.EXPIRED}),
    QuotationStatus.SENT: frozenset(
        {
            QuotationStatus.VIEWED,
            QuotationStatus.ACCEPTED,
            QuotationStatus.REJECTED,
            QuotationStatus.EXPIRED,
        }
    ),
    QuotationStatus.VIEWED: frozenset(
        {QuotationStatus.ACCEPTED, QuotationStatus.REJECTED, QuotationStatus.EXPIRED}
    ),
    QuotationStatus.ACCEPTED: frozenset(
        {QuotationStatus.CONVERTED, QuotationStatus.EXPIRED}
    ),
}

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_NOTES_LENGTH = 1000
MAX_TERMS_LENGTH = 2000


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Quotation:
    """Aggregate root for quotations.

    Use ``Quotation.create()`` for new quotations; ``__init__`` stays
    simple so repositories can reconstitute persisted ones as-is.
    """

    quotation_number: str
    customer_name: str
    items: list[LineItem]
    valid_until: datetime
    customer_email: str = ""
    taxes: list[DocumentTax] = field(default_factory=list)
    status: QuotationStatus = QuotationStatus.DRAFT
    notes: str = ""
    terms: str = ""
    created_at: datetime = field(default_factory=_utcnow)
    sent_at: datetime | None = None
    viewed_at: datetime | None = None
    accepted_at: datetime | None = None
    rejected_at: datetime | None = None
    converted_at: datetime | None = None
    converted_to_order: str | None = None

    # --- Factory (used for NEW quotations only) -------------------------------

    @staticmethod
    def create(
        quotation_number: str,
        customer_name: str,
        items: list[LineItem],
        valid_until: datetime,
        customer_email: str = "",
        taxes: list[DocumentTax] | None = None,
        notes: str = "",
        terms: str = "",
        now: datetime | None = None,
    ) -> Quotation:
        """Create a draft quotation, enforcing all invariants."""
        now = now or _utcnow()

        if not customer_name or not customer_name.strip():
            raise ValidationError("Customer name is required")
        if not items:
            raise ValidationError("At least one item is required")
        if valid_until <= now:
            raise ValidationError("Valid until date must be in the future")
        if len(notes) > MAX_NOTES_LENGTH:
            raise ValidationError(f"Notes must not exceed {MAX_NOTES_LENGTH} characters")
        if len(terms) > MAX_TERMS_LENGTH:
            raise ValidationError(f"Terms must not exceed {MAX_TERMS_LENGTH} characters")

        return Quotation(
            quotation_number=quotation_number,
            customer_name=customer_name.strip(),
            customer_email=customer_email.strip(),
            items=list(items),
            taxes=list(taxes or []),
            valid_until=valid_until,
            notes=notes,
            terms=terms,
            created_at=now,
        )

    # --- State transitions ----------------------------------------------------

    def send(self, now: datetime | None = None) -> None:
        """Transition DRAFT -> SENT."""
        now = now or _utcnow()
        self._transition(QuotationStatus.SENT)
        self.sent_at = now

    def mark_viewed(self, now: datetime | None = None) -> None:
        """Transition SENT -> VIEWED.  Viewing again is a no-op."""
        if self.status == QuotationStatus.VIEWED:
            return
        now = now or _utcnow()
        self._transition(QuotationStatus.VIEWED)
        self.viewed_at = now

    def accept(self, now: datetime | None = None) -> None:
        """Transition SENT|VIEWED -> ACCEPTED, unless validity has lapsed."""
        now = now or _utcnow()
        if self.is_past_validity(now) and self.status not in TERMINAL_STATUSES:
            raise ValidationError(
                f"Quotation {self.quotation_number} has expired"
            )
        self._transition(QuotationStatus.ACCEPTED)
        self.accepted_at = now

    def reject(self, now: datetime | None = None) -> None:
        """Transition SENT|VIEWED -> REJECTED."""
        now = now or _utcnow()
        self._transition(QuotationStatus.REJECTED)
        self.rejected_at = now

    def expire(self, now: datetime | None = None) -> None:
        """Move a non-terminal quotation past its validity to EXPIRED."""
        now = now or _utcnow()
        if not self.is_past_validity(now):
            raise ValidationError(
                f"Quotation {self.quotation_number} is valid until "
                f"{self.valid_until:%Y-%m-%d} and cannot expire yet"
            )
        self._transition(QuotationStatus.EXPIRED)

    def convert(self, order_number: str, now: datetime | None = None) -> None:
        """Transition ACCEPTED -> CONVERTED.

        The caller must have run a successful availability check first;
        the aggregate does not re-validate stock.
        """
        now = now or _utcnow()
        self._transition(QuotationStatus.CONVERTED)
        self.converted_at = now
        self.converted_to_order = order_number

    # --- Queries --------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def is_past_validity(self, now: datetime | None = None) -> bool:
        return self.valid_until < (now or _utcnow())

    def can_transition_to(self, target: QuotationStatus) -> bool:
        return target in _ALLOWED_TRANSITIONS.get(self.status, frozenset())

    @property
    def totals(self) -> PriceCalculation:
        return calculate_price(self.items, taxes=self.taxes)

    # --- Internal helpers -----------------------------------------------------

    def _transition(self, target: QuotationStatus) -> None:
        if not self.can_transition_to(target):
            raise InvalidTransitionError(
                f"Cannot move quotation {self.quotation_number} from "
                f"{self.status.value} to {target.value}"
            )
        self.status = target
