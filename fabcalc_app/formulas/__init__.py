"""Fabrication formulas for linear and area treatments"""

from .area import AreaResult, calculate_area
from .grid import lookup_grid_price, normalize_grid_data
from .linear import LinearResult, calculate_linear, resolve_fullness
from .options import calculate_options_cost, calculate_single_option_cost
from .pricing import calculate_fabric_cost, calculate_material_cost, normalize_pricing_method

__all__ = [
    "AreaResult",
    "LinearResult",
    "calculate_area",
    "calculate_linear",
    "resolve_fullness",
    "calculate_fabric_cost",
    "calculate_material_cost",
    "normalize_pricing_method",
    "calculate_options_cost",
    "calculate_single_option_cost",
    "lookup_grid_price",
    "normalize_grid_data",
]
