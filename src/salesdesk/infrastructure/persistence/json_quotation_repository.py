"""JSON-file-backed implementation of QuotationRepository."""

from __future__ import annotations

import json
from pathlib import Path

from salesdesk.domain.model.quotation import Quotation, QuotationStatus
from salesdesk.domain.repository.quotation_repository import QuotationRepository
from salesdesk.infrastructure.persistence.serialization import (
    datetime_from_raw,
    datetime_to_raw,
    document_tax_from_raw,
    document_tax_to_raw,
    line_item_from_raw,
    line_item_to_raw,
)

_TIMESTAMPS = ("sent_at", "viewed_at", "accepted_at", "rejected_at", "converted_at")


class JsonQuotationRepository(QuotationRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- QuotationRepository interface ----------------------------------------

    def count(self) -> int:
        return len(self._load_raw())

    def get_by_number(self, quotation_number: str) -> Quotation | None:
        for raw in self._load_raw():
            if raw["quotation_number"] == quotation_number:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Quotation]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, quotation: Quotation) -> None:
        records = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["quotation_number"] == quotation.quotation_number:
                records[i] = self._to_raw(quotation)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(quotation))

        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(quotation: Quotation) -> dict:
        raw = {
            "quotation_number": quotation.quotation_number,
            "customer_name": quotation.customer_name,
            "customer_email": quotation.customer_email,
            "status": quotation.status.value,
            "valid_until": quotation.valid_until.isoformat(),
            "created_at": quotation.created_at.isoformat(),
            "notes": quotation.notes,
            "terms": quotation.terms,
            "converted_to_order": quotation.converted_to_order,
            "items": [line_item_to_raw(item) for item in quotation.items],
            "taxes": [document_tax_to_raw(tax) for tax in quotation.taxes],
        }
        for name in _TIMESTAMPS:
            raw[name] = datetime_to_raw(getattr(quotation, name))
        return raw

    @staticmethod
    def _to_domain(raw: dict) -> Quotation:
        quotation = Quotation(
            quotation_number=raw["quotation_number"],
            customer_name=raw["customer_name"],
            customer_email=raw.get("customer_email", ""),
            items=[line_item_from_raw(i) for i in raw["items"]],
            taxes=[document_tax_from_raw(t) for t in raw.get("taxes", [])],
            status=QuotationStatus(raw["status"]),
            valid_until=datetime_from_raw(raw["valid_until"]),
            created_at=datetime_from_raw(raw["created_at"]),
            notes=raw.get("notes", ""),
            terms=raw.get("terms", ""),
            converted_to_order=raw.get("converted_to_order"),
        )
        for name in _TIMESTAMPS:
            setattr(quotation, name, datetime_from_raw(raw.get(name)))
        return quotation

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
