"""
Fabcalc App - Fabrication Calculation Engine

Calculates fabric and material requirements and itemized costs for window
treatments (curtains, roman blinds, roller blinds, shutters and similar),
and allocates quote discounts.
"""

from .discounts import DiscountAllocator, calculate_discount_amount
from .engine import CalculationEngine, calculate

__version__ = "0.1.0"
__author__ = "Fabcalc Team"

__all__ = ["CalculationEngine", "DiscountAllocator", "calculate", "calculate_discount_amount"]
