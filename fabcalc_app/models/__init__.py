"""
Data models and contracts module.

Immutable data structures for calculation inputs, results, pricing grids
and discount configuration.
"""

from .categories import (
    AREA_TYPES,
    LINEAR_TYPES,
    TreatmentKind,
    classify,
    infer_category_from_name,
    is_area_type,
    is_linear_type,
    is_unsupported_type,
)
from .contracts import (
    CalculationInput,
    CalculationResult,
    Fabric,
    FormulaBreakdown,
    FormulaStep,
    Material,
    Measurements,
    SelectedOption,
    Template,
)
from .discount import DiscountConfig
from .pricing_grid import GridDropRow, PricingGrid

__all__ = [
    "AREA_TYPES",
    "LINEAR_TYPES",
    "TreatmentKind",
    "classify",
    "infer_category_from_name",
    "is_area_type",
    "is_linear_type",
    "is_unsupported_type",
    "CalculationInput",
    "CalculationResult",
    "Fabric",
    "FormulaBreakdown",
    "FormulaStep",
    "Material",
    "Measurements",
    "SelectedOption",
    "Template",
    "DiscountConfig",
    "GridDropRow",
    "PricingGrid",
]
