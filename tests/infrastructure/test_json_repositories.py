"""Round-trip tests for the JSON-file repositories."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from salesdesk.domain.model.inventory import BinLocation, StockRecord
from salesdesk.domain.model.order import Order, OrderStatus
from salesdesk.domain.model.pricing import DocumentTax, LineItem, Shipping
from salesdesk.domain.model.quotation import Quotation, QuotationStatus
from salesdesk.domain.model.value_objects import Money, Percentage, Quantity
from salesdesk.infrastructure.persistence.json_order_repository import JsonOrderRepository
from salesdesk.infrastructure.persistence.json_product_repository import JsonProductRepository
from salesdesk.infrastructure.persistence.json_quotation_repository import (
    JsonQuotationRepository,
)

NOW = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


def _item() -> LineItem:
    return LineItem(
        name="Widget",
        quantity=Quantity(2),
        unit_price=Money.of("10.125"),
        discount_percent=Percentage.of("7.5"),
        tax_rate_percent=Percentage.of("8"),
        product_id="1",
    )


class TestJsonProductRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        repo = JsonProductRepository(path)
        assert path.exists()
        assert repo.list_all() == []

    def test_save_and_lookup(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(
            StockRecord("1", "Widget", "WID-1", current_stock=8, min_stock=3,
                        location=BinLocation.parse("A-01-02-03"), price=Money.of("15.50"))
        )

        reloaded = JsonProductRepository(tmp_path / "products.json")
        record = reloaded.get_by_sku("wid-1")
        assert record.price == Money.of("15.50")
        assert record.location == BinLocation("A", "01", "02", "03")
        assert reloaded.lookup_stock("1").min_stock == 3
        assert reloaded.lookup_location("1").code == "A-01-02-03"
        assert reloaded.lookup_stock("missing") is None


class TestJsonQuotationRepository:

    def test_round_trip_keeps_precision_and_status(self, tmp_path):
        repo = JsonQuotationRepository(tmp_path / "quotations.json")
        quotation = Quotation.create(
            quotation_number="QUO-202610-0001",
            customer_name="Alice",
            customer_email="alice@example.com",
            items=[_item()],
            taxes=[DocumentTax("VAT", Percentage.of("20"))],
            valid_until=NOW + timedelta(days=30),
            notes="Deliver to dock 4",
            now=NOW,
        )
        quotation.send(NOW)
        repo.save(quotation)

        loaded = repo.get_by_number("QUO-202610-0001")
        assert loaded.status == QuotationStatus.SENT
        assert loaded.sent_at == NOW
        assert loaded.viewed_at is None
        assert loaded.items[0].unit_price.amount == Decimal("10.125")
        assert loaded.taxes == quotation.taxes
        assert loaded.totals == quotation.totals

    def test_save_is_upsert(self, tmp_path):
        repo = JsonQuotationRepository(tmp_path / "quotations.json")
        quotation = Quotation.create(
            "QUO-202610-0001", "Alice", [_item()], NOW + timedelta(days=1), now=NOW
        )
        repo.save(quotation)
        quotation.send(NOW)
        repo.save(quotation)
        assert repo.count() == 1


class TestJsonOrderRepository:

    def test_round_trip(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = Order.create(
            "ORD-202610-0001", "Alice", [_item()],
            shipping=Shipping(Money.of("4.99"), "courier"),
            taxes=[DocumentTax("GST", Percentage.of("5"))], now=NOW,
        )
        order.update_status(OrderStatus.CONFIRMED, notes="ok", now=NOW)
        order.assign_warehouse("North")
        repo.save(order)

        loaded = repo.get_by_number("ORD-202610-0001")
        assert loaded.status == OrderStatus.CONFIRMED
        assert loaded.shipping == Shipping(Money.of("4.99"), "courier")
        assert loaded.taxes == [DocumentTax("GST", Percentage.of("5"))]
        assert loaded.totals == order.totals
        assert loaded.warehouse == "North"
        assert loaded.status_history == order.status_history
        assert repo.get_by_number("ORD-202610-0002") is None
