"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from salesdesk.infrastructure import settings
from salesdesk.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from salesdesk.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from salesdesk.infrastructure.persistence.json_quotation_repository import (
    JsonQuotationRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings.DATA_DIR / "products.json", settings.CURRENCY)


def quotation_repository() -> JsonQuotationRepository:
    return JsonQuotationRepository(settings.DATA_DIR / "quotations.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings.DATA_DIR / "orders.json")
