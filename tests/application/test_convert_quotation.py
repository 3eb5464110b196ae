"""Integration tests for the ConvertQuotation use case."""

from datetime import datetime, timedelta, timezone

import pytest

from salesdesk.application.convert_quotation import ConvertQuotationHandler
from salesdesk.domain.exceptions import EntityNotFoundError, ValidationError
from salesdesk.domain.model.inventory import StockRecord
from salesdesk.domain.model.order import OrderStatus
from salesdesk.domain.model.pricing import DocumentTax, LineItem
from salesdesk.domain.model.quotation import Quotation, QuotationStatus
from salesdesk.domain.model.value_objects import Money, Percentage, Quantity
from tests.fakes import (
    FakeOrderRepository,
    FakeProductRepository,
    FakeQuotationRepository,
)

NOW = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


def _quotation(qty: int = 2, accepted: bool = True) -> Quotation:
    q = Quotation.create(
        quotation_number="QUO-202610-0001",
        customer_name="Alice",
        items=[LineItem("Widget", Quantity(qty), Money.of("12.50"), product_id="1")],
        valid_until=NOW + timedelta(days=30),
        now=NOW,
    )
    if accepted:
        q.send(NOW)
        q.accept(NOW)
    return q


def _setup(quotation: Quotation, stock: int = 10):
    quotations = FakeQuotationRepository([quotation])
    orders = FakeOrderRepository()
    products = FakeProductRepository([StockRecord("1", "Widget", "WID-1", current_stock=stock)])
    handler = ConvertQuotationHandler(quotations, orders, products)
    return handler, quotations, orders, products


class TestConvertQuotation:

    def test_creates_pending_order(self):
        handler, quotations, orders, _ = _setup(_quotation())
        dto = handler.handle("QUO-202610-0001", now=NOW)

        assert dto.order_number == "ORD-202610-0001"
        assert dto.status == "pending"
        assert dto.quotation_number == "QUO-202610-0001"
        assert dto.totals.grand_total == "$25.00"

        order = orders.get_by_number(dto.order_number)
        assert order.status == OrderStatus.PENDING
        assert order.source == "quotation"

        quotation = quotations.get_by_number("QUO-202610-0001")
        assert quotation.status == QuotationStatus.CONVERTED
        assert quotation.converted_to_order == "ORD-202610-0001"

    def test_conversion_does_not_consume_stock(self):
        handler, _, _, products = _setup(_quotation())
        handler.handle("QUO-202610-0001", now=NOW)
        assert products.get_by_id("1").current_stock == 10

    def test_draft_cannot_convert(self):
        handler, quotations, orders, _ = _setup(_quotation(accepted=False))
        with pytest.raises(ValidationError, match="Only accepted quotations"):
            handler.handle("QUO-202610-0001", now=NOW)
        assert quotations.get_by_number("QUO-202610-0001").status == QuotationStatus.DRAFT
        assert orders.count() == 0

    def test_second_conversion_rejected(self):
        handler, _, orders, _ = _setup(_quotation())
        handler.handle("QUO-202610-0001", now=NOW)
        with pytest.raises(ValidationError, match="already converted"):
            handler.handle("QUO-202610-0001", now=NOW)
        assert orders.count() == 1

    def test_insufficient_stock_blocks_conversion(self):
        handler, quotations, orders, _ = _setup(_quotation(qty=5), stock=3)
        with pytest.raises(ValidationError, match="1 item\\(s\\) unavailable"):
            handler.handle("QUO-202610-0001", now=NOW)
        assert quotations.get_by_number("QUO-202610-0001").status == QuotationStatus.ACCEPTED
        assert orders.count() == 0

    def test_unknown_quotation(self):
        handler, _, _, _ = _setup(_quotation())
        with pytest.raises(EntityNotFoundError):
            handler.handle("QUO-202610-0404", now=NOW)

    def test_order_keeps_quotation_document_taxes(self):
        quotation = Quotation.create(
            quotation_number="QUO-202610-0001",
            customer_name="Alice",
            items=[LineItem("Widget", Quantity(1), Money.of("100.00"), product_id="1")],
            taxes=[DocumentTax("VAT", Percentage.of("10"))],
            valid_until=NOW + timedelta(days=30),
            now=NOW,
        )
        quotation.send(NOW)
        quotation.accept(NOW)
        handler, _, orders, _ = _setup(quotation)

        dto = handler.handle("QUO-202610-0001", now=NOW)

        assert dto.totals.grand_total == "$110.00"
        assert dto.totals.total_tax == "$10.00"
        assert orders.get_by_number(dto.order_number).totals == quotation.totals
