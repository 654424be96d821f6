"""
Linear (running length) fabric calculation for curtains and roman blinds.

Standard orientation, fabric roll running top to bottom:

    total_drop     = drop + header_hem + bottom_hem + pooling
    finished_width = (rail_width + overlap) x fullness
    total_width    = finished_width + return_left + return_right
                     + side_hem x 2 x panels
    widths         = ceil(total_width / fabric_width), at least 1
    seams          = widths - 1
    linear_cm      = widths x total_drop + seams x seam_hem

Railroaded orientation turns the fabric 90 degrees, so the roll width
covers the drop instead:

    pieces    = ceil(total_drop / fabric_width), at least 1
    seams     = pieces - 1
    linear_cm = pieces x total_width + seams x seam_hem

All inputs are in centimeters except the measurements (millimeters).
"""

from dataclasses import dataclass
from typing import Optional

from ..errors import ConfigurationError
from ..models.contracts import Fabric, FormulaBreakdown, Measurements, Template
from ..utils.units import cm_to_m, mm_to_cm, round_to
from .common import calculate_seam_allowance, calculate_seam_count, fmt, safe_ceil, step

VERTICAL = "vertical"
RAILROADED = "railroaded"


@dataclass(frozen=True)
class LinearResult:
    """Geometry of a linear treatment."""
    linear_meters: float
    linear_meters_raw: float
    widths_required: int
    seams_count: int
    total_drop_cm: float
    total_width_cm: float
    finished_width_cm: float
    seam_allowance_cm: float
    total_side_hems_cm: float
    total_returns_cm: float
    fullness: float
    orientation: str
    breakdown: FormulaBreakdown


def resolve_fullness(measurements: Measurements, template: Template) -> float:
    """
    Resolve the fullness ratio: measurement override, then template default.

    Raises:
        ConfigurationError: If neither source supplies a fullness ratio
    """
    if measurements.heading_fullness is not None:
        return measurements.heading_fullness

    if template.default_fullness_ratio is not None:
        return template.default_fullness_ratio

    raise ConfigurationError(
        "Fullness ratio is required for linear calculation (no default allowed)",
        contract="template",
        missing_fields=["heading_fullness", "default_fullness_ratio"],
    )


def _resolve_return_cm(return_mm: Optional[float], template: Template) -> float:
    if return_mm is not None:
        return mm_to_cm(return_mm)
    if template.default_returns_cm is not None:
        return template.default_returns_cm
    return 0.0


def _resolve_overlap_cm(measurements: Measurements, template: Template) -> float:
    if measurements.overlap_mm is not None:
        return mm_to_cm(measurements.overlap_mm)
    if template.default_overlap_cm is not None:
        return template.default_overlap_cm
    return 0.0


def _resolve_seam_hem_cm(seams_count: int, template: Template) -> float:
    if seams_count == 0:
        return template.seam_hem_cm or 0.0

    if template.seam_hem_cm is None:
        raise ConfigurationError(
            f"Seam allowance is required to join {seams_count + 1} fabric widths",
            contract="template",
            missing_fields=["seam_hem_cm"],
        )
    return template.seam_hem_cm


def calculate_linear(
    measurements: Measurements,
    template: Template,
    fabric: Fabric,
    decimals: int = 2,
) -> LinearResult:
    """
    Calculate the fabric requirement of a linear treatment.

    Args:
        measurements: Validated measurements (mm)
        template: Validated template (cm)
        fabric: Validated fabric with a positive width_cm
        decimals: Decimals used to round the reported linear meters

    Returns:
        LinearResult with geometry and formula breakdown

    Raises:
        ConfigurationError: If fullness or a needed seam allowance is missing
    """
    fullness = resolve_fullness(measurements, template)
    fabric_width_cm = fabric.width_cm
    if fabric_width_cm is None:
        raise ConfigurationError(
            "Fabric width is required for linear calculation",
            contract="fabric",
            missing_fields=["width_cm"],
        )

    rail_width_cm = mm_to_cm(measurements.rail_width_mm)
    drop_cm = mm_to_cm(measurements.drop_mm)
    pooling_cm = mm_to_cm(measurements.pooling_mm) if measurements.pooling_mm is not None else 0.0
    overlap_cm = _resolve_overlap_cm(measurements, template)
    return_left_cm = _resolve_return_cm(measurements.return_left_mm, template)
    return_right_cm = _resolve_return_cm(measurements.return_right_mm, template)
    panel_count = measurements.panel_count

    steps = []

    total_drop_cm = drop_cm + template.header_hem_cm + template.bottom_hem_cm + pooling_cm
    steps.append(step(
        "Total drop",
        f"{fmt(drop_cm)} + {fmt(template.header_hem_cm)} (header) + "
        f"{fmt(template.bottom_hem_cm)} (bottom) + {fmt(pooling_cm)} (pooling)",
        total_drop_cm, "cm",
    ))

    finished_width_cm = (rail_width_cm + overlap_cm) * fullness
    steps.append(step(
        "Finished width",
        f"({fmt(rail_width_cm)} rail + {fmt(overlap_cm)} overlap) x {fmt(fullness)} fullness",
        finished_width_cm, "cm",
    ))

    # Side hems on both sides of every panel
    total_side_hems_cm = template.side_hem_cm * 2 * panel_count
    steps.append(step(
        "Total side hems",
        f"{fmt(template.side_hem_cm)} x 2 sides x {panel_count} panel(s)",
        total_side_hems_cm, "cm",
    ))

    total_returns_cm = return_left_cm + return_right_cm
    total_width_cm = finished_width_cm + total_returns_cm + total_side_hems_cm
    steps.append(step(
        "Total width",
        f"{fmt(finished_width_cm)} (finished) + {fmt(total_returns_cm)} (returns) + "
        f"{fmt(total_side_hems_cm)} (side hems)",
        total_width_cm, "cm",
    ))

    if measurements.fabric_rotated:
        orientation = RAILROADED
        pieces = max(safe_ceil(total_drop_cm / fabric_width_cm), 1)
        steps.append(step(
            "Horizontal pieces",
            f"ceil({fmt(total_drop_cm)} drop / {fmt(fabric_width_cm)} fabric width)",
            pieces, " pieces",
        ))
        piece_length_cm = total_width_cm
    else:
        orientation = VERTICAL
        pieces = max(safe_ceil(total_width_cm / fabric_width_cm), 1)
        steps.append(step(
            "Widths required",
            f"ceil({fmt(total_width_cm)} / {fmt(fabric_width_cm)})",
            pieces, " widths",
        ))
        piece_length_cm = total_drop_cm

    seams_count = calculate_seam_count(pieces)
    seam_hem_cm = _resolve_seam_hem_cm(seams_count, template)
    seam_allowance_cm = calculate_seam_allowance(seams_count, seam_hem_cm)
    steps.append(step(
        "Seam allowance",
        f"{seams_count} seam(s) x {fmt(seam_hem_cm)} cm/seam",
        seam_allowance_cm, "cm",
    ))

    linear_cm = pieces * piece_length_cm + seam_allowance_cm
    linear_meters_raw = cm_to_m(linear_cm)
    linear_meters = round_to(linear_meters_raw, decimals)
    steps.append(step(
        "Total fabric",
        f"({pieces} x {fmt(piece_length_cm)} cm) + {fmt(seam_allowance_cm)} cm seams",
        linear_meters, "m",
    ))

    values = {
        "fullness": fullness,
        "rail_width_cm": rail_width_cm,
        "drop_cm": drop_cm,
        "overlap_cm": overlap_cm,
        "pooling_cm": pooling_cm,
        "panel_count": panel_count,
        "finished_width_cm": finished_width_cm,
        "total_side_hems_cm": total_side_hems_cm,
        "total_returns_cm": total_returns_cm,
        "total_width_cm": total_width_cm,
        "total_drop_cm": total_drop_cm,
        "fabric_width_cm": fabric_width_cm,
        "widths_required": pieces,
        "seams_count": seams_count,
        "seam_hem_cm": seam_hem_cm,
        "seam_allowance_cm": seam_allowance_cm,
        "linear_meters_raw": linear_meters_raw,
        "linear_meters": linear_meters,
        "orientation": orientation,
    }

    summary = (
        f"{orientation.upper()}: {pieces} piece(s) x {fmt(piece_length_cm)}cm + "
        f"{fmt(seam_allowance_cm)}cm seams = {fmt(linear_meters)}m"
    )

    return LinearResult(
        linear_meters=linear_meters,
        linear_meters_raw=linear_meters_raw,
        widths_required=pieces,
        seams_count=seams_count,
        total_drop_cm=total_drop_cm,
        total_width_cm=total_width_cm,
        finished_width_cm=finished_width_cm,
        seam_allowance_cm=seam_allowance_cm,
        total_side_hems_cm=total_side_hems_cm,
        total_returns_cm=total_returns_cm,
        fullness=fullness,
        orientation=orientation,
        breakdown=FormulaBreakdown(
            steps=tuple(str(s) for s in steps),
            values=values,
            summary=summary,
        ),
    )
