"""Pricing grid data model (width x drop lookup table)."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GridDropRow:
    """One drop row with a price per width column."""
    drop: float
    prices: tuple[float, ...]


@dataclass(frozen=True)
class PricingGrid:
    """Width x drop price table normalised to a single unit."""
    width_columns: tuple[float, ...]    # Ascending
    drop_rows: tuple[GridDropRow, ...]  # Ascending by drop
    unit: str = "cm"                    # 'cm' or 'mm'
    currency: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """True when the grid has no columns or no rows."""
        return not self.width_columns or not self.drop_rows
