"""Unit tests for stock records and bin locations."""

import pytest

from salesdesk.domain.exceptions import ValidationError
from salesdesk.domain.model.inventory import BinLocation, StockRecord, StockStatus
from salesdesk.domain.model.value_objects import Money


class TestBinLocation:

    def test_parse_and_code(self):
        location = BinLocation.parse("A-01-02-03")
        assert location == BinLocation("A", "01", "02", "03")
        assert location.code == "A-01-02-03"
        assert str(location) == "A-01-02-03"

    def test_parse_needs_four_parts(self):
        with pytest.raises(ValidationError, match="Zone-Aisle-Shelf-Bin"):
            BinLocation.parse("A-01-02")

    def test_blank_part_rejected(self):
        with pytest.raises(ValidationError, match="Location shelf is required"):
            BinLocation("A", "01", " ", "03")


class TestStockRecord:

    def _record(self, current: int, minimum: int) -> StockRecord:
        return StockRecord("1", "Widget", "WID-1", current_stock=current, min_stock=minimum)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            self._record(-1, 0)

    def test_stock_status(self):
        assert self._record(0, 5).stock_status == StockStatus.OUT_OF_STOCK
        assert self._record(5, 5).stock_status == StockStatus.LOW_STOCK
        assert self._record(6, 5).stock_status == StockStatus.IN_STOCK

    def test_set_levels(self):
        record = self._record(10, 2)
        record.set_levels(4, min_stock=6)
        assert record.current_stock == 4
        assert record.min_stock == 6

    def test_set_levels_keeps_minimum_when_omitted(self):
        record = self._record(10, 2)
        record.set_levels(1)
        assert record.min_stock == 2

    def test_set_levels_rejects_negative(self):
        record = self._record(10, 2)
        with pytest.raises(ValidationError):
            record.set_levels(-3)
        assert record.current_stock == 10

    def test_update_price(self):
        record = self._record(1, 0)
        record.update_price(Money.of("19.99"))
        assert record.price == Money.of("19.99")
