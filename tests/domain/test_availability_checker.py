"""Unit tests for the inventory availability checker."""

from salesdesk.domain.model.availability import (
    AvailabilityRequest,
    AvailabilityStatus,
    InventoryCheckSummary,
)
from salesdesk.domain.model.inventory import StockLevel, StockRecord
from salesdesk.domain.service.availability_checker import (
    InventoryAvailabilityChecker,
    evaluate_line,
)
from tests.fakes import FakeProductRepository


def _checker(*records: StockRecord) -> InventoryAvailabilityChecker:
    return InventoryAvailabilityChecker(FakeProductRepository(list(records)))


def _record(product_id: str, current: int, minimum: int = 0) -> StockRecord:
    return StockRecord(
        product_id=product_id,
        product_name=f"Product {product_id}",
        sku=f"SKU-{product_id}",
        current_stock=current,
        min_stock=minimum,
    )


class TestEvaluateLine:

    def test_enough_stock_above_minimum(self):
        line = evaluate_line(AvailabilityRequest("1", 3), StockLevel(5, 2))
        assert line.is_available
        assert not line.is_low_stock
        assert not line.needs_reorder
        assert line.status == AvailabilityStatus.AVAILABLE

    def test_short_stock_is_unavailable_and_low(self):
        line = evaluate_line(AvailabilityRequest("1", 3), StockLevel(1, 5))
        assert not line.is_available
        assert line.is_low_stock
        assert not line.needs_reorder
        assert line.shortfall == 2
        assert line.status == AvailabilityStatus.OUT_OF_STOCK

    def test_available_but_at_minimum_needs_reorder(self):
        line = evaluate_line(AvailabilityRequest("1", 2), StockLevel(4, 4))
        assert line.is_available
        assert line.is_low_stock
        assert line.needs_reorder
        assert line.status == AvailabilityStatus.LOW_STOCK

    def test_exact_stock_is_available(self):
        line = evaluate_line(AvailabilityRequest("1", 5), StockLevel(5, 0))
        assert line.is_available
        assert line.shortfall == 0

    def test_unknown_product_reported_with_zero_stock(self):
        line = evaluate_line(AvailabilityRequest("ghost", 1), None)
        assert not line.found
        assert line.current_stock == 0
        assert line.available_quantity == 0
        assert not line.is_available


class TestInventoryAvailabilityChecker:

    def test_mixed_batch_summary(self):
        checker = _checker(_record("1", 5, 2), _record("2", 1, 5), _record("3", 3, 3))
        report = checker.check(
            [
                AvailabilityRequest("1", 3),
                AvailabilityRequest("2", 3),
                AvailabilityRequest("3", 1),
            ]
        )
        assert report.summary == InventoryCheckSummary(
            total_items=3,
            available_items=2,
            unavailable_items=1,
            low_stock_items=1,
        )
        assert not report.summary.can_fulfill
        assert [line.product_id for line in report.unavailable_lines] == ["2"]
        assert [line.product_id for line in report.low_stock_lines] == ["3"]

    def test_summary_counts_add_up(self):
        checker = _checker(_record("1", 10), _record("2", 0))
        report = checker.check([AvailabilityRequest("1", 1), AvailabilityRequest("2", 1)])
        s = report.summary
        assert s.available_items + s.unavailable_items == s.total_items

    def test_unknown_product_does_not_abort_batch(self):
        checker = _checker(_record("1", 10))
        report = checker.check(
            [AvailabilityRequest("missing", 2, "Ghost"), AvailabilityRequest("1", 1)]
        )
        assert report.summary.total_items == 2
        assert report.summary.unavailable_items == 1
        assert report.lines[0].product_name == "Ghost"
        assert not report.lines[0].found

    def test_duplicate_products_are_merged(self):
        checker = _checker(_record("1", 5))
        report = checker.check([AvailabilityRequest("1", 3), AvailabilityRequest("1", 3)])
        assert len(report.lines) == 1
        assert report.lines[0].requested_quantity == 6
        assert not report.lines[0].is_available

    def test_empty_request_list_can_fulfill(self):
        report = _checker().check([])
        assert report.lines == ()
        assert report.summary.total_items == 0
        assert report.summary.can_fulfill

    def test_check_does_not_touch_stock(self):
        record = _record("1", 5)
        _checker(record).check([AvailabilityRequest("1", 5)])
        assert record.current_stock == 5
