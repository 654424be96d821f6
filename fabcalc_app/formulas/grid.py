"""
Pricing grid normalisation and lookup.

Stored grids come in a few shapes; all are normalised to PricingGrid:

- standard:  {"widthColumns": [...], "dropRows": [{"drop": d, "prices": [...]}], "unit": "cm"}
- ranges:    {"widthRanges": [...], "dropRanges": [...], "prices": [[...], ...]}
- dims:      {"widths": [...], "heights": [...], "prices": [[...], ...]}

Lookups round up to the next grid column and row, clamping to the last one.
"""

import re
from typing import Any, Optional

from ..models.pricing_grid import GridDropRow, PricingGrid

_NUMERIC_CHARS = re.compile(r"[^0-9.\-]")


def to_number(value: Any) -> float:
    """Parse a grid cell or header ('120cm', '£45.50') to a float; unparseable is 0."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        cleaned = _NUMERIC_CHARS.sub("", value)
        try:
            return float(cleaned)
        except ValueError:
            return 0.0
    return 0.0


def infer_unit(data: dict[str, Any], mm_threshold: float = 500.0) -> str:
    """
    Infer the dimension unit of a raw grid.

    An explicit 'unit' wins. Otherwise grids whose largest dimension is at
    least mm_threshold are taken to be in millimeters.
    """
    unit = data.get("unit")
    if unit in ("cm", "mm"):
        return unit

    max_value = 0.0
    for key in ("widthColumns", "widthRanges", "widths", "dropRows", "dropRanges", "heights"):
        entries = data.get(key)
        if not isinstance(entries, list):
            continue
        for entry in entries:
            number = to_number(entry["drop"]) if isinstance(entry, dict) and "drop" in entry else to_number(entry)
            max_value = max(max_value, number)

    return "mm" if max_value >= mm_threshold else "cm"


def _build_grid(
    widths: list, rows: list[tuple[Any, list]], unit: str, currency: Optional[str] = None
) -> PricingGrid:
    """
    Build a PricingGrid with columns and rows sorted ascending.

    Each row's prices are reordered with their columns. Cells missing from a
    short row become 0, which lookups treat as no price.
    """
    columns = [to_number(w) for w in widths]
    order = sorted(range(len(columns)), key=lambda i: columns[i])

    drop_rows = []
    for drop, prices in rows:
        cells = [to_number(p) for p in prices]
        drop_rows.append(GridDropRow(
            drop=to_number(drop),
            prices=tuple(cells[i] if i < len(cells) else 0.0 for i in order),
        ))
    drop_rows.sort(key=lambda row: row.drop)

    return PricingGrid(
        width_columns=tuple(columns[i] for i in order),
        drop_rows=tuple(drop_rows),
        unit=unit,
        currency=currency,
    )


def _from_matrix(widths: list, drops: list, prices: list, unit: str) -> Optional[PricingGrid]:
    if not isinstance(prices, list) or not all(isinstance(row, list) for row in prices):
        return None
    # A drop label without a price row (or the reverse) leaves the table ambiguous
    if len(drops) != len(prices):
        return None
    return _build_grid(widths, list(zip(drops, prices)), unit)


def normalize_grid_data(data: Any, mm_threshold: float = 500.0) -> Optional[PricingGrid]:
    """
    Normalise any known raw grid shape to a PricingGrid.

    Args:
        data: Raw grid record (or an already normalised PricingGrid)
        mm_threshold: Dimension above which an unlabelled grid is read as mm

    Returns:
        PricingGrid, or None when the data is not a recognisable grid
    """
    if isinstance(data, PricingGrid):
        return data
    if not isinstance(data, dict):
        return None

    unit = infer_unit(data, mm_threshold)

    width_columns = data.get("widthColumns")
    drop_rows = data.get("dropRows")
    if isinstance(width_columns, list) and isinstance(drop_rows, list):
        if not all(isinstance(row, dict) and isinstance(row.get("prices"), list) for row in drop_rows):
            return None
        return _build_grid(
            width_columns,
            [(row.get("drop"), row["prices"]) for row in drop_rows],
            unit,
            currency=data.get("currency"),
        )

    if isinstance(data.get("widthRanges"), list) and isinstance(data.get("dropRanges"), list):
        return _from_matrix(data["widthRanges"], data["dropRanges"], data.get("prices"), unit)

    if isinstance(data.get("widths"), list) and isinstance(data.get("heights"), list):
        return _from_matrix(data["widths"], data["heights"], data.get("prices"), unit)

    return None


def lookup_grid_price(grid: Optional[PricingGrid], width_cm: float, drop_cm: float) -> Optional[float]:
    """
    Look up the price for a width x drop given in centimeters.

    Args:
        grid: Normalised pricing grid
        width_cm: Width to price
        drop_cm: Drop to price

    Returns:
        Positive grid price, or None when the grid has no usable cell
    """
    if grid is None or grid.is_empty:
        return None

    width = width_cm * 10 if grid.unit == "mm" else width_cm
    drop = drop_cm * 10 if grid.unit == "mm" else drop_cm

    width_idx = next(
        (i for i, column in enumerate(grid.width_columns) if column >= width),
        len(grid.width_columns) - 1,
    )
    drop_idx = next(
        (i for i, row in enumerate(grid.drop_rows) if row.drop >= drop),
        len(grid.drop_rows) - 1,
    )

    row = grid.drop_rows[drop_idx]
    if width_idx >= len(row.prices):
        return None

    price = row.prices[width_idx]
    return price if price > 0 else None
