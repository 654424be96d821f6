"""
Length and area unit helpers.

Unit conventions used throughout the engine:
- Measurements arrive in millimeters (as stored)
- Template allowances and fabric widths are in centimeters
- Fabric usage is reported in linear meters, material usage in square meters
"""

from decimal import ROUND_HALF_UP, Decimal


def mm_to_cm(value_mm: float) -> float:
    """Convert millimeters to centimeters."""
    return value_mm / 10


def cm_to_m(value_cm: float) -> float:
    """Convert centimeters to meters."""
    return value_cm / 100


def mm_to_m(value_mm: float) -> float:
    """Convert millimeters to meters."""
    return value_mm / 1000


def cm_to_mm(value_cm: float) -> float:
    """Convert centimeters to millimeters."""
    return value_cm * 10


def round_to(value: float, decimals: int = 2) -> float:
    """
    Round a value half-up to a fixed number of decimals.

    Uses the decimal string representation so that values such as 1.005
    round the way a price would be written on a quote (1.01), not the way
    binary floating point happens to store them.

    Args:
        value: Value to round
        decimals: Number of decimal places to keep

    Returns:
        Rounded float
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def sqm_from_cm(width_cm: float, height_cm: float) -> float:
    """Area in square meters of a width x height given in centimeters."""
    return cm_to_m(width_cm) * cm_to_m(height_cm)


def format_number(value: float, decimals: int = 2) -> str:
    """
    Format a number for breakdown text without losing digits.

    Rounds half-up to `decimals` places and strips trailing zeros, so
    12345.67 stays '12345.67', 1000000.0 is '1000000' and 10.40 is '10.4'.
    """
    text = f"{Decimal(str(round_to(value, decimals))):.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
