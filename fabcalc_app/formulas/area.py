"""
Area (square meter) calculation for blinds, shutters and awnings.

    effective_width  = rail_width + side_hem x 2
    effective_height = drop + header_hem + bottom_hem
    sqm              = effective_width/100 x effective_height/100

Area treatments have no fullness, returns or seams.
"""

from dataclasses import dataclass

from ..models.contracts import FormulaBreakdown, Measurements, Template
from ..utils.units import mm_to_cm, round_to, sqm_from_cm
from .common import fmt, step


@dataclass(frozen=True)
class AreaResult:
    """Geometry of an area treatment."""
    sqm: float
    sqm_raw: float
    effective_width_cm: float
    effective_height_cm: float
    breakdown: FormulaBreakdown


def calculate_area(
    measurements: Measurements,
    template: Template,
    decimals: int = 2,
) -> AreaResult:
    """
    Calculate the material area of an area treatment.

    Args:
        measurements: Validated measurements (mm)
        template: Validated template (cm)
        decimals: Decimals used to round the reported area

    Returns:
        AreaResult with geometry and formula breakdown
    """
    rail_width_cm = mm_to_cm(measurements.rail_width_mm)
    drop_cm = mm_to_cm(measurements.drop_mm)

    effective_width_cm = rail_width_cm + 2 * template.side_hem_cm
    effective_height_cm = drop_cm + template.header_hem_cm + template.bottom_hem_cm
    sqm_raw = sqm_from_cm(effective_width_cm, effective_height_cm)
    sqm = round_to(sqm_raw, decimals)

    steps = (
        step(
            "Effective width",
            f"{fmt(rail_width_cm)} + {fmt(template.side_hem_cm)} x 2 (side hems)",
            effective_width_cm, "cm",
        ),
        step(
            "Effective height",
            f"{fmt(drop_cm)} + {fmt(template.header_hem_cm)} (header) + "
            f"{fmt(template.bottom_hem_cm)} (bottom)",
            effective_height_cm, "cm",
        ),
        step(
            "Area",
            f"{fmt(effective_width_cm / 100)} x {fmt(effective_height_cm / 100)}",
            sqm, "m²",
        ),
    )

    values = {
        "rail_width_cm": rail_width_cm,
        "drop_cm": drop_cm,
        "side_hem_cm": template.side_hem_cm,
        "header_hem_cm": template.header_hem_cm,
        "bottom_hem_cm": template.bottom_hem_cm,
        "effective_width_cm": effective_width_cm,
        "effective_height_cm": effective_height_cm,
        "sqm_raw": sqm_raw,
        "sqm": sqm,
    }

    return AreaResult(
        sqm=sqm,
        sqm_raw=sqm_raw,
        effective_width_cm=effective_width_cm,
        effective_height_cm=effective_height_cm,
        breakdown=FormulaBreakdown(
            steps=tuple(str(s) for s in steps),
            values=values,
            summary=f"AREA: {fmt(effective_width_cm)}cm x {fmt(effective_height_cm)}cm = {fmt(sqm)}m²",
        ),
    )
