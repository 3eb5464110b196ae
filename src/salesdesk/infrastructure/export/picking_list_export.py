"""Picking list exports: CSV for spreadsheets, HTML for printing."""

from __future__ import annotations

import csv
import html
import io
from collections.abc import Collection

from salesdesk.domain.model.picking import PickingList, PickingListItem

CSV_HEADER = ["Product Name", "SKU", "Quantity", "Location", "Priority", "Status"]

_PRIORITY_LABELS = {
    "high": "High Priority",
    "normal": "Normal",
    "low": "Low Priority",
}


def _status(item: PickingListItem, picked: Collection[str]) -> str:
    return "Picked" if item.product_id in picked else "Pending"


def to_csv(picking_list: PickingList, picked: Collection[str] = ()) -> str:
    """Render the list as CSV; ``picked`` holds product ids already picked."""
    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for item in picking_list.items:
        writer.writerow(
            [
                item.product_name,
                item.sku,
                item.quantity,
                item.location_code,
                item.priority.value,
                _status(item, picked),
            ]
        )
    content = output.getvalue()
    output.close()
    return content


def to_html(
    picking_list: PickingList,
    title: str = "Picking List",
    picked: Collection[str] = (),
) -> str:
    """Render a self-contained, print-ready HTML page."""
    rows = "\n".join(
        "      <tr>"
        f"<td>{html.escape(item.product_name)}</td>"
        f"<td>{html.escape(item.sku)}</td>"
        f"<td class=\"num\">{item.quantity}</td>"
        f"<td>{html.escape(item.location_code)}</td>"
        f"<td class=\"priority-{item.priority.value}\">"
        f"{_PRIORITY_LABELS[item.priority.value]}</td>"
        f"<td>{_status(item, picked)}</td>"
        "<td class=\"check\">&#9744;</td>"
        "</tr>"
        for item in picking_list.items
    )
    escaped_title = html.escape(title)
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{escaped_title}</title>
  <style>
    body {{ font-family: sans-serif; margin: 2em; }}
    table {{ border-collapse: collapse; width: 100%; }}
    th, td {{ border: 1px solid #444; padding: 4px 8px; text-align: left; }}
    td.num {{ text-align: right; }}
    td.check {{ text-align: center; font-size: 1.2em; }}
    .priority-high {{ font-weight: bold; }}
    @media print {{ body {{ margin: 0; }} }}
  </style>
</head>
<body>
  <h1>{escaped_title}</h1>
  <p>Items: {picking_list.total_items} &middot; Units: {picking_list.total_units}
     &middot; Estimated pick time: {picking_list.estimated_pick_minutes} min</p>
  <table>
    <thead>
      <tr><th>Product</th><th>SKU</th><th>Quantity</th><th>Location</th><th>Priority</th><th>Status</th><th>Picked</th></tr>
    </thead>
    <tbody>
{rows}
    </tbody>
  </table>
</body>
</html>
"""
