"""Tests for the CSV and HTML picking list exports."""

import csv
import io

from salesdesk.domain.model.inventory import BinLocation
from salesdesk.domain.model.picking import PickingList, PickingListItem, PickPriority
from salesdesk.infrastructure.export.picking_list_export import CSV_HEADER, to_csv, to_html


def _picking_list() -> PickingList:
    return PickingList(
        items=(
            PickingListItem("1", "Widget, large", "WID-1", 3, BinLocation.parse("A-01-01-01"),
                            PickPriority.HIGH),
            PickingListItem("2", "<Gadget>", "GAD-1", 1, None, PickPriority.NORMAL),
        ),
        estimated_pick_seconds=130,
    )


class TestCsvExport:

    def test_header_and_rows(self):
        rows = list(csv.reader(io.StringIO(to_csv(_picking_list()))))
        assert rows[0] == CSV_HEADER
        assert rows[1] == ["Widget, large", "WID-1", "3", "A-01-01-01", "high", "Pending"]
        assert rows[2] == ["<Gadget>", "GAD-1", "1", "No Location", "normal", "Pending"]

    def test_picked_status(self):
        rows = list(csv.reader(io.StringIO(to_csv(_picking_list(), picked={"2"}))))
        assert [row[-1] for row in rows[1:]] == ["Pending", "Picked"]


class TestHtmlExport:

    def test_values_are_escaped(self):
        page = to_html(_picking_list())
        assert "&lt;Gadget&gt;" in page
        assert "<Gadget>" not in page

    def test_summary_and_labels(self):
        page = to_html(_picking_list(), title="Picking List QUO-202610-0001")
        assert "<title>Picking List QUO-202610-0001</title>" in page
        assert "Estimated pick time: 3 min" in page
        assert "High Priority" in page
        assert "No Location" in page
