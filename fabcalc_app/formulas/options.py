"""
Options cost calculation.

Each selected option is priced by its own method. Whether a method is valid
is decided by the same category classifier the engine dispatches with, so
an option can never be priced per meter on a treatment that has no running
length.
"""

from typing import Optional, Sequence

from ..errors import CalculationError
from ..models.categories import TreatmentKind, classify
from ..models.contracts import SelectedOption
from ..utils.units import round_to
from .grid import lookup_grid_price
from .pricing import FIXED, PER_METER, PER_SQM, PERCENTAGE, PRICING_GRID, normalize_pricing_method


def calculate_single_option_cost(
    option: SelectedOption,
    category: str,
    linear_meters: Optional[float] = None,
    sqm: Optional[float] = None,
    base_amount: float = 0.0,
    width_cm: Optional[float] = None,
    drop_cm: Optional[float] = None,
    decimals: int = 2,
) -> float:
    """
    Price one selected option.

    Args:
        option: Validated option
        category: Treatment category being priced
        linear_meters: Linear meters of a linear treatment
        sqm: Area of an area treatment
        base_amount: Base subtotal for percentage options
        width_cm: Width for grid-priced options
        drop_cm: Drop for grid-priced options
        decimals: Decimals of the returned cost

    Returns:
        Option cost rounded to decimals

    Raises:
        CalculationError: If the method cannot apply to the category or the
            figure it needs is missing
    """
    method = normalize_pricing_method(option.pricing_method)
    label = option.value_label or option.option_key

    if method == FIXED:
        return round_to(option.price, decimals)

    if method == PER_METER:
        if classify(category) != TreatmentKind.LINEAR:
            raise CalculationError(
                f"Option \"{label}\" uses per_meter pricing, "
                f"but per_meter pricing not valid for area treatments ({category})",
                code=CalculationError.OPTION_PRICING,
                details={"option_key": option.option_key, "category": category},
            )
        if linear_meters is None:
            raise CalculationError(
                f"Option \"{label}\" uses per_meter pricing but no linear meters were calculated",
                code=CalculationError.OPTION_PRICING,
                details={"option_key": option.option_key, "category": category},
            )
        return round_to(option.price * linear_meters, decimals)

    if method == PER_SQM:
        if sqm is None:
            raise CalculationError(
                f"Option \"{label}\" uses per_sqm pricing but no area was calculated",
                code=CalculationError.OPTION_PRICING,
                details={"option_key": option.option_key, "category": category},
            )
        return round_to(option.price * sqm, decimals)

    if method == PERCENTAGE:
        if not base_amount:
            return 0.0
        return round_to(base_amount * option.price / 100, decimals)

    if method == PRICING_GRID:
        grid_price = None
        if width_cm is not None and drop_cm is not None:
            grid_price = lookup_grid_price(option.pricing_grid, width_cm, drop_cm)
        return round_to(grid_price if grid_price is not None else option.price, decimals)

    raise CalculationError(
        f"Unknown pricing method \"{option.pricing_method}\" for option \"{label}\"",
        code=CalculationError.UNKNOWN_PRICING_METHOD,
        details={"option_key": option.option_key, "pricing_method": option.pricing_method},
    )


def calculate_options_cost(
    options: Sequence[SelectedOption],
    category: str,
    linear_meters: Optional[float] = None,
    sqm: Optional[float] = None,
    base_amount: float = 0.0,
    width_cm: Optional[float] = None,
    drop_cm: Optional[float] = None,
    decimals: int = 2,
) -> tuple[float, list[tuple[SelectedOption, float]]]:
    """
    Price all selected options.

    Returns:
        Tuple of (options_cost, [(option, cost), ...]) in selection order
    """
    priced = [
        (
            option,
            calculate_single_option_cost(
                option,
                category,
                linear_meters=linear_meters,
                sqm=sqm,
                base_amount=base_amount,
                width_cm=width_cm,
                drop_cm=drop_cm,
                decimals=decimals,
            ),
        )
        for option in options
    ]
    return round_to(sum(cost for _, cost in priced), decimals), priced
