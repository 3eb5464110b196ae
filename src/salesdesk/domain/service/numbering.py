"""Document number generation (``QUO-202610-0001``, ``ORD-202610-0001``)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

QUOTATION_PREFIX = "QUO"
ORDER_PREFIX = "ORD"


def next_document_number(prefix: str, existing_count: int, now: datetime) -> str:
    """Number the next document from how many already exist."""
    return f"{prefix}-{now:%Y%m}-{existing_count + 1:04d}"


def allocate_document_number(
    prefix: str,
    existing_count: int,
    is_taken: Callable[[str], bool],
    now: datetime,
) -> str:
    """Like ``next_document_number`` but skips numbers already in use."""
    count = existing_count
    number = next_document_number(prefix, count, now)
    while is_taken(number):
        count += 1
        number = next_document_number(prefix, count, now)
    return number
