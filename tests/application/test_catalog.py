"""Integration tests for the product, inventory and price use cases."""

import pytest

from salesdesk.application.add_product import AddProductHandler
from salesdesk.application.calculate_price import CalculatePriceHandler
from salesdesk.application.set_inventory import SetInventoryHandler
from salesdesk.application.show_inventory import ShowInventoryHandler
from salesdesk.application.update_product import UpdateProductHandler
from salesdesk.domain.exceptions import EntityNotFoundError, ValidationError
from salesdesk.domain.model.inventory import BinLocation
from salesdesk.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


class TestAddProduct:

    def test_assigns_sequential_ids(self):
        repo = FakeProductRepository()
        handler = AddProductHandler(repo)
        first = handler.handle("Widget", "WID-1", "15.00")
        second = handler.handle("Gadget", "GAD-1", "25.00", current_stock=4, location="A-01-01-02")
        assert (first.product_id, second.product_id) == ("1", "2")
        assert repo.get_by_sku("GAD-1").location == BinLocation("A", "01", "01", "02")

    def test_duplicate_sku_rejected(self):
        handler = AddProductHandler(FakeProductRepository())
        handler.handle("Widget", "WID-1", "15.00")
        with pytest.raises(ValidationError, match="already exists"):
            handler.handle("Widget v2", "WID-1", "16.00")

    def test_bad_location_rejected(self):
        with pytest.raises(ValidationError, match="Invalid location"):
            AddProductHandler(FakeProductRepository()).handle(
                "Widget", "WID-1", "15.00", location="shelf 3"
            )


class TestStockMaintenance:

    def _repo(self) -> FakeProductRepository:
        repo = FakeProductRepository()
        AddProductHandler(repo).handle("Widget", "WID-1", "15.00", current_stock=10, min_stock=2)
        AddProductHandler(repo).handle("Gadget", "GAD-1", "25.00", current_stock=1, min_stock=3)
        return repo

    def test_set_inventory(self):
        repo = self._repo()
        SetInventoryHandler(repo).handle("WID-1", 7, min_stock=4, location="B-02-01-01")
        record = repo.get_by_sku("WID-1")
        assert (record.current_stock, record.min_stock) == (7, 4)
        assert record.location.code == "B-02-01-01"

    def test_set_inventory_unknown_sku(self):
        with pytest.raises(EntityNotFoundError):
            SetInventoryHandler(self._repo()).handle("NOPE", 1)

    def test_show_low_stock_only(self):
        lines = ShowInventoryHandler(self._repo()).handle(low_stock_only=True)
        assert [(line.sku, line.status) for line in lines] == [("GAD-1", "low_stock")]

    def test_update_price(self):
        repo = self._repo()
        UpdateProductHandler(repo).handle("GAD-1", "19.99")
        assert repo.get_by_sku("GAD-1").price == Money.of("19.99")


class TestCalculatePrice:

    def test_live_totals(self):
        dto = CalculatePriceHandler().handle(
            [{"name": "Widget", "quantity": "2", "unit_price": "10", "discount": "10", "tax_rate": "5"}],
            shipping_cost="5",
        )
        assert dto.subtotal == "$20.00"
        assert dto.total_discount == "$2.00"
        assert dto.total_tax == "$0.90"
        assert dto.grand_total == "$23.90"
        assert dto.lines[0].line_total == "$18.90"

    def test_document_discount_and_tax(self):
        dto = CalculatePriceHandler().handle(
            [{"name": "Widget", "quantity": "1", "unit_price": "100"}],
            discounts={"Promo": "10"},
            taxes={"VAT": "20"},
        )
        assert dto.total_discount == "$10.00"
        assert dto.total_tax == "$18.00"
        assert dto.grand_total == "$108.00"
