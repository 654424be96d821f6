"""
Fabric and material pricing.

Pricing method codes arrive in several spellings from stored records
('per-running-meter', 'per_metre', 'flat'...). They are normalised to four
canonical methods before pricing:

    per_meter      price x linear meters
    per_sqm        price x square meters
    fixed          flat price
    pricing_grid   width x drop table lookup
"""

from typing import Optional

from ..errors import CalculationError, ConfigurationError
from ..models.contracts import Fabric, Material
from ..utils.units import round_to, sqm_from_cm
from .grid import lookup_grid_price

PER_METER = "per_meter"
PER_SQM = "per_sqm"
FIXED = "fixed"
PERCENTAGE = "percentage"
PRICING_GRID = "pricing_grid"

_METHOD_ALIASES = {
    "per_meter": PER_METER,
    "per_metre": PER_METER,
    "per_running_meter": PER_METER,
    "per_running_metre": PER_METER,
    "per_linear_meter": PER_METER,
    "per_linear_metre": PER_METER,
    "linear_meter": PER_METER,
    "linear_metre": PER_METER,
    "per_m": PER_METER,
    "per_sqm": PER_SQM,
    "per_square_meter": PER_SQM,
    "per_square_metre": PER_SQM,
    "per_m2": PER_SQM,
    "fixed": FIXED,
    "fixed_price": FIXED,
    "flat": FIXED,
    "flat_rate": FIXED,
    "per_unit": FIXED,
    "per_item": FIXED,
    "per_piece": FIXED,
    "pricing_grid": PRICING_GRID,
    "grid": PRICING_GRID,
    "percentage": PERCENTAGE,
    "percent": PERCENTAGE,
}


def normalize_pricing_method(method: str) -> str:
    """Map a stored pricing method spelling to its canonical code; unknown codes pass through."""
    normalized = method.strip().lower().replace("-", "_")
    return _METHOD_ALIASES.get(normalized, normalized)


def _require_price(price: Optional[float], contract: str, field: str, method: str) -> float:
    if price is None:
        raise ConfigurationError(
            f"{contract} priced {method} has no {field}",
            contract=contract,
            missing_fields=[field],
        )
    return price


def calculate_fabric_cost(
    fabric: Fabric,
    linear_meters: Optional[float],
    width_cm: float,
    drop_cm: float,
    sqm: Optional[float] = None,
    decimals: int = 2,
) -> float:
    """
    Price a fabric by its declared pricing method.

    Args:
        fabric: Validated fabric
        linear_meters: Linear meters required (None for area treatments)
        width_cm: Width used for area and grid pricing; for linear
            treatments this is the total fabric width incl. fullness
        drop_cm: Drop used for area and grid pricing
        sqm: Precomputed area; when absent the area is width x drop
        decimals: Decimals of the returned cost

    Returns:
        Fabric cost

    Raises:
        ConfigurationError: If the price field for the method is missing
        CalculationError: If the method cannot apply to this treatment
    """
    method = normalize_pricing_method(fabric.pricing_method)

    if method == PER_METER:
        price = _require_price(fabric.price_per_meter, "fabric", "price_per_meter", method)
        if linear_meters is None:
            raise CalculationError(
                f"Fabric \"{fabric.name or fabric.id}\" uses per_meter pricing but the "
                f"treatment produced no linear meters",
                code=CalculationError.OPTION_PRICING,
                details={"fabric_id": fabric.id, "pricing_method": fabric.pricing_method},
            )
        return round_to(price * linear_meters, decimals)

    if method == PER_SQM:
        price = _require_price(fabric.price_per_sqm, "fabric", "price_per_sqm", method)
        area = sqm if sqm is not None else sqm_from_cm(width_cm, drop_cm)
        return round_to(price * area, decimals)

    if method == FIXED:
        return round_to(_require_price(fabric.price_per_meter, "fabric", "price_per_meter", method), decimals)

    if method == PRICING_GRID:
        grid_price = lookup_grid_price(fabric.pricing_grid, width_cm, drop_cm)
        if grid_price is None:
            raise ConfigurationError(
                f"Fabric \"{fabric.name or fabric.id}\" has no grid price for "
                f"{round_to(width_cm, 1)}cm x {round_to(drop_cm, 1)}cm",
                contract="fabric",
                missing_fields=["pricing_grid"],
            )
        markup = 1 + fabric.pricing_grid_markup / 100
        return round_to(grid_price * markup, decimals)

    raise CalculationError(
        f"Unknown fabric pricing method: {fabric.pricing_method}",
        code=CalculationError.UNKNOWN_PRICING_METHOD,
        details={"fabric_id": fabric.id, "pricing_method": fabric.pricing_method},
    )


def calculate_material_cost(
    material: Material,
    sqm: float,
    width_cm: float,
    drop_cm: float,
    decimals: int = 2,
) -> float:
    """
    Price an area-treatment material by its declared pricing method.

    Args:
        material: Validated material
        sqm: Area of material required
        width_cm: Rail width used for grid lookup
        drop_cm: Drop used for grid lookup
        decimals: Decimals of the returned cost

    Returns:
        Material cost
    """
    method = normalize_pricing_method(material.pricing_method)

    if method == PER_SQM:
        price = _require_price(material.price, "material", "price", method)
        return round_to(price * sqm, decimals)

    if method == FIXED:
        return round_to(_require_price(material.price, "material", "price", method), decimals)

    if method == PRICING_GRID:
        grid_price = lookup_grid_price(material.pricing_grid, width_cm, drop_cm)
        if grid_price is None:
            raise ConfigurationError(
                f"Material \"{material.name or material.id}\" has no grid price for "
                f"{round_to(width_cm, 1)}cm x {round_to(drop_cm, 1)}cm",
                contract="material",
                missing_fields=["pricing_grid"],
            )
        return round_to(grid_price, decimals)

    raise CalculationError(
        f"Unknown material pricing method: {material.pricing_method}",
        code=CalculationError.UNKNOWN_PRICING_METHOD,
        details={"material_id": material.id, "pricing_method": material.pricing_method},
    )
