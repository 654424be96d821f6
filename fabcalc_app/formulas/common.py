"""Shared formula helpers: seams, ceilings and formula step formatting."""

import math

from ..models.contracts import FormulaStep
from ..utils.units import format_number, round_to

# Ratios are rounded to this many decimals before taking a ceiling so that
# float noise (2.0000000000000004) never buys an extra fabric width.
CEIL_PRECISION = 9


def safe_ceil(value: float) -> int:
    """Ceiling that ignores binary floating point noise."""
    return math.ceil(round(value, CEIL_PRECISION))


def calculate_seam_count(pieces: int) -> int:
    """Seams needed to join a number of fabric pieces."""
    return max(pieces - 1, 0)


def calculate_seam_allowance(seams_count: int, seam_hem_cm: float) -> float:
    """Total seam allowance; seam_hem_cm is the total per join, not per side."""
    return seams_count * seam_hem_cm


def fmt(value: float) -> str:
    """Format a number for a formula string (500.0 -> '500', 12345.67 -> '12345.67')."""
    return format_number(value, 2)


def step(label: str, formula: str, result: float, unit: str) -> FormulaStep:
    """Build a formula step with its result rounded for display."""
    return FormulaStep(label=label, formula=formula, result=round_to(result, 2), unit=unit)
