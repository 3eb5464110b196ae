"""End-to-end tests of the CLI against JSON files in a temp directory."""

import logging
from datetime import datetime, timezone

import pytest
from click.testing import CliRunner

from salesdesk.infrastructure import settings
from salesdesk.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "DATA_DIR", tmp_path / "data")
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    # each test gets fresh handlers writing under its own tmp_path
    logger = logging.getLogger("salesdesk")
    monkeypatch.setattr(logger, "handlers", [])
    yield CliRunner()
    for handler in logger.handlers:
        handler.close()


def _invoke(runner, *args):
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result


def _quotation_number() -> str:
    return f"QUO-{datetime.now(timezone.utc):%Y%m}-0001"


def _seed(runner, stock: int = 10) -> None:
    _invoke(runner, "product", "add", "--name", "Widget", "--sku", "WID-1",
            "--price", "12.50", "--stock", str(stock), "--location", "A-01-01-01")
    _invoke(runner, "product", "add", "--name", "Gadget", "--sku", "GAD-1",
            "--price", "30", "--stock", "5", "--min-stock", "5")
    _invoke(runner, "quotation", "create", "--customer", "Alice",
            "--items", "WID-1:4,GAD-1:1")


class TestPriceCommand:

    def test_prints_totals(self, runner):
        result = _invoke(runner, "price", "--items", "Widget:2:10:10:5", "--shipping", "5")
        assert "$18.90" in result.output
        assert "$23.90" in result.output

    def test_field_errors_listed(self, runner):
        result = runner.invoke(cli, ["price", "--items", "Widget:0:10"])
        assert result.exit_code != 0
        assert "items[0].quantity: Quantity must be at least 1" in result.output

    def test_malformed_items(self, runner):
        result = runner.invoke(cli, ["price", "--items", "Widget"])
        assert result.exit_code != 0
        assert "Invalid item format" in result.output


class TestCatalogCommands:

    def test_product_and_inventory_listing(self, runner):
        _seed(runner)
        result = _invoke(runner, "product", "list")
        assert "WID-1" in result.output
        assert "$12.50" in result.output

        _invoke(runner, "inventory", "set", "--sku", "WID-1", "--quantity", "0")
        result = _invoke(runner, "inventory", "show", "--low")
        assert "out_of_stock" in result.output
        assert "low_stock" in result.output

    def test_unknown_sku_in_quotation(self, runner):
        result = runner.invoke(
            cli, ["quotation", "create", "--customer", "Alice", "--items", "NOPE:1"]
        )
        assert result.exit_code != 0
        assert "Product not found: SKU 'NOPE'" in result.output


class TestQuotationFlow:

    def test_create_to_convert(self, runner, tmp_path):
        _seed(runner)
        number = _quotation_number()

        result = _invoke(runner, "quotation", "check", number)
        assert "Unavailable: 0" in result.output
        assert "1 item(s) are running low" in result.output

        csv_path = tmp_path / "pick.csv"
        result = _invoke(runner, "quotation", "picking-list", number, "--csv", str(csv_path))
        assert "~3 min" in result.output
        lines = csv_path.read_text(encoding="utf-8").splitlines()
        assert lines[1].startswith("Widget,WID-1,4,A-01-01-01")
        assert lines[2].startswith("Gadget,GAD-1,1,No Location,high")

        _invoke(runner, "quotation", "send", number)
        _invoke(runner, "quotation", "accept", number)
        result = _invoke(runner, "quotation", "convert", number)
        assert "converted to order ORD-" in result.output

        result = _invoke(runner, "quotation", "show", number)
        assert "status=converted" in result.output

    def test_convert_draft_fails(self, runner):
        _seed(runner)
        result = runner.invoke(cli, ["quotation", "convert", _quotation_number()])
        assert result.exit_code != 0
        assert "Only accepted quotations" in result.output

    def test_picking_list_refused_when_short(self, runner):
        _seed(runner, stock=2)
        result = runner.invoke(cli, ["quotation", "picking-list", _quotation_number()])
        assert result.exit_code != 0
        assert "1 item(s) unavailable" in result.output

    def test_expire_with_nothing_due(self, runner):
        _seed(runner)
        result = _invoke(runner, "quotation", "expire")
        assert "No quotations to expire." in result.output


class TestOrderCommands:

    def test_status_and_payment(self, runner):
        _seed(runner)
        number = _quotation_number()
        _invoke(runner, "quotation", "send", number)
        _invoke(runner, "quotation", "accept", number)
        _invoke(runner, "quotation", "convert", number)
        order_number = f"ORD-{datetime.now(timezone.utc):%Y%m}-0001"

        _invoke(runner, "order", "status", order_number, "confirmed")
        _invoke(runner, "order", "payment", order_number, "paid")
        _invoke(runner, "order", "assign-warehouse", order_number, "North")
        result = _invoke(runner, "order", "show", order_number)
        assert "status=confirmed" in result.output
        assert "Payment:     paid" in result.output
        assert "Warehouse:   North" in result.output

        result = runner.invoke(cli, ["order", "status", order_number, "delivered"])
        assert result.exit_code != 0
        assert "Cannot move order" in result.output


class TestConfiguration:

    def test_bad_numeric_setting_reported_cleanly(self, runner, monkeypatch):
        _seed(runner)
        monkeypatch.setenv("SALESDESK_PICK_BASE_SECONDS", "sixty")
        result = runner.invoke(cli, ["quotation", "picking-list", _quotation_number()])
        assert result.exit_code == 1
        assert "SALESDESK_PICK_BASE_SECONDS must be a whole number" in result.output
        assert "Traceback" not in result.output
