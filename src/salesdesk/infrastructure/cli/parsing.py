"""Shared option parsing and error reporting for the CLI commands."""

from __future__ import annotations

import click

from salesdesk.domain.exceptions import DomainException, ValidationError
from salesdesk.infrastructure.settings import ConfigurationError

_ROW_FIELDS = ("quantity", "unit_price", "discount", "tax_rate")


def parse_rows(raw: str, key_field: str) -> list[dict[str, str]]:
    """Parse 'Key:Qty[:Price[:Discount[:Tax]]],...' into row dicts.

    ``key_field`` names what the first part is (``name`` or ``sku``).
    """
    rows: list[dict[str, str]] = []
    for chunk in raw.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = [p.strip() for p in chunk.split(":")]
        if len(parts) < 2 or len(parts) > 1 + len(_ROW_FIELDS):
            raise click.BadParameter(
                f"Invalid item format '{chunk}'. "
                f"Expected '{key_field.title()}:Qty[:Price[:Discount%[:Tax%]]]'."
            )
        row = {key_field: parts[0]}
        row.update(zip(_ROW_FIELDS, parts[1:]))
        rows.append(row)
    if not rows:
        raise click.BadParameter("At least one item is required.")
    return rows


def parse_labelled(values: tuple[str, ...], what: str) -> dict[str, str]:
    """Parse repeated 'Label=Value' options (document taxes, discounts)."""
    result: dict[str, str] = {}
    for value in values:
        if "=" not in value:
            raise click.BadParameter(f"Invalid {what} '{value}'. Expected 'Label=Value'.")
        label, amount = value.split("=", 1)
        result[label.strip()] = amount.strip()
    return result


def to_click_exception(exc: DomainException | ConfigurationError) -> click.ClickException:
    """Render a domain error, one line per field problem when there are any."""
    if isinstance(exc, ValidationError) and exc.errors:
        lines = ["Validation failed:"] + [f"  {error}" for error in exc.errors]
        return click.ClickException("\n".join(lines))
    return click.ClickException(str(exc))
