"""
Input and output contracts of the calculation engine.

Every contract is an immutable dataclass constructed fresh for a single
calculation. Units follow storage: measurements in millimeters, template
allowances and fabric widths in centimeters.

Optional fields are documented with their fallback order. A field with no
fallback that is needed by a calculation raises an error; nothing here is
silently zero.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ..utils.units import format_number
from .pricing_grid import PricingGrid


@dataclass(frozen=True)
class Measurements:
    """Surface measurements in millimeters."""
    rail_width_mm: float
    drop_mm: float
    heading_fullness: Optional[float] = None   # Falls back to template.default_fullness_ratio
    return_left_mm: Optional[float] = None     # Falls back to template.default_returns_cm, then 0
    return_right_mm: Optional[float] = None    # Falls back to template.default_returns_cm, then 0
    overlap_mm: Optional[float] = None         # Falls back to template.default_overlap_cm, then 0
    pooling_mm: Optional[float] = None         # Absent means no pooling
    panel_configuration: str = "single"        # 'single' or 'pair'
    fabric_rotated: bool = False               # Railroaded fabric

    @property
    def panel_count(self) -> int:
        """Number of panels hung from the rail."""
        return 2 if self.panel_configuration == "pair" else 1


@dataclass(frozen=True)
class Template:
    """Per-treatment manufacturing constants in centimeters."""
    header_hem_cm: float
    bottom_hem_cm: float
    side_hem_cm: float
    waste_percentage: float
    pricing_type: str
    seam_hem_cm: Optional[float] = None            # Total per seam; required once a seam exists
    default_returns_cm: Optional[float] = None
    default_fullness_ratio: Optional[float] = None
    default_overlap_cm: Optional[float] = None
    base_price: Optional[float] = None
    id: str = ""
    name: str = ""
    treatment_category: str = ""


@dataclass(frozen=True)
class Fabric:
    """Fabric used by linear treatments (and optionally area treatments)."""
    pricing_method: str                  # per_running_meter, per_meter, per_sqm, fixed, pricing_grid
    width_cm: Optional[float] = None     # Roll width; required for linear treatments
    price_per_meter: Optional[float] = None
    price_per_sqm: Optional[float] = None
    pricing_grid: Optional[PricingGrid] = None
    pricing_grid_markup: float = 0.0     # Percentage added to grid prices
    id: str = ""
    name: str = ""


@dataclass(frozen=True)
class Material:
    """Hard material used by area treatments."""
    pricing_method: str                  # per_sqm, fixed, pricing_grid
    price: Optional[float] = None
    pricing_grid: Optional[PricingGrid] = None
    id: str = ""
    name: str = ""


@dataclass(frozen=True)
class SelectedOption:
    """An add-on selected for the treatment."""
    option_id: str
    option_key: str
    value_id: str
    value_label: str
    price: float
    pricing_method: str                  # fixed, per_unit, per_meter, per_sqm, percentage, pricing_grid
    pricing_grid: Optional[PricingGrid] = None


@dataclass(frozen=True)
class CalculationInput:
    """Everything a single calculation needs."""
    category: str
    measurements: Measurements
    template: Template
    fabric: Optional[Fabric] = None
    material: Optional[Material] = None
    options: Sequence[SelectedOption] = ()


@dataclass(frozen=True)
class FormulaStep:
    """One human-readable step of a formula."""
    label: str
    formula: str
    result: float
    unit: str

    def __str__(self) -> str:
        return f"{self.label}: {self.formula} = {format_number(self.result)}{self.unit}"


@dataclass(frozen=True)
class FormulaBreakdown:
    """Read-only audit record of the intermediates behind a result."""
    steps: tuple[str, ...] = ()
    values: dict[str, Any] = field(default_factory=dict)
    summary: str = ""


@dataclass(frozen=True)
class CalculationResult:
    """Fabrication requirement and itemized cost of one treatment."""
    width_cm: float
    drop_cm: float
    fabric_cost: float
    material_cost: float
    options_cost: float
    base_cost: float
    subtotal: float
    waste_amount: float
    total: float
    formula_breakdown: FormulaBreakdown
    # Linear treatments
    linear_meters: Optional[float] = None
    widths_required: Optional[int] = None
    seams_count: Optional[int] = None
    total_drop_cm: Optional[float] = None
    total_width_cm: Optional[float] = None
    # Area treatments
    effective_width_cm: Optional[float] = None
    effective_height_cm: Optional[float] = None
    sqm: Optional[float] = None
