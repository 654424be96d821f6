"""
Contract validation for calculation inputs.

Checks run before any arithmetic. A missing, non-numeric or out-of-range
field raises ValidationError naming the field. Values are never coerced
and never defaulted: strings such as "120" are rejected, not parsed.
"""

import math
from typing import Any, Optional

from ..errors import ValidationError
from ..models.categories import TreatmentKind
from ..models.contracts import Fabric, Material, Measurements, SelectedOption, Template

PANEL_CONFIGURATIONS = ("single", "pair")


def require_number(value: Any, field: str, message: Optional[str] = None) -> float:
    """
    Require a real, finite number.

    Args:
        value: Value to check
        field: Field name reported in the error
        message: Optional message overriding the default one

    Returns:
        The value as a float

    Raises:
        ValidationError: If the value is missing, non-numeric, NaN or infinite
    """
    if value is None:
        raise ValidationError(
            message or f"{field} is required",
            field=field,
            code=ValidationError.MISSING_REQUIRED,
        )

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            message or f"{field} must be a valid number",
            field=field,
            code=ValidationError.INVALID_TYPE,
            details={"received": type(value).__name__, "value": value},
        )

    if math.isnan(value) or math.isinf(value):
        raise ValidationError(
            message or f"{field} must be a finite number",
            field=field,
            code=ValidationError.INVALID_TYPE,
            details={"value": value},
        )

    return float(value)


def require_positive(value: Any, field: str, message: Optional[str] = None) -> float:
    """Require a number greater than zero."""
    number = require_number(value, field, message)

    if number <= 0:
        raise ValidationError(
            message or f"{field} must be greater than 0",
            field=field,
            code=ValidationError.OUT_OF_RANGE,
            details={"received": number},
        )

    return number


def require_non_negative(value: Any, field: str, message: Optional[str] = None) -> float:
    """Require a number greater than or equal to zero."""
    number = require_number(value, field, message)

    if number < 0:
        raise ValidationError(
            message or f"{field} must be 0 or greater",
            field=field,
            code=ValidationError.OUT_OF_RANGE,
            details={"received": number},
        )

    return number


def require_method(value: Any, field: str) -> str:
    """Require a non-empty pricing method string."""
    if value is None or value == "":
        raise ValidationError(
            f"{field} is required",
            field=field,
            code=ValidationError.MISSING_REQUIRED,
        )

    if not isinstance(value, str):
        raise ValidationError(
            f"{field} must be a string",
            field=field,
            code=ValidationError.INVALID_TYPE,
            details={"received": type(value).__name__},
        )

    return value


def _optional_non_negative(value: Any, field: str) -> None:
    if value is not None:
        require_non_negative(value, field)


def validate_measurements(measurements: Measurements) -> None:
    """Validate surface measurements (all in millimeters)."""
    require_positive(
        measurements.rail_width_mm, "rail_width_mm",
        "Rail width is required and must be greater than 0",
    )
    require_positive(
        measurements.drop_mm, "drop_mm",
        "Drop is required and must be greater than 0",
    )

    if measurements.heading_fullness is not None:
        require_positive(measurements.heading_fullness, "heading_fullness")

    _optional_non_negative(measurements.return_left_mm, "return_left_mm")
    _optional_non_negative(measurements.return_right_mm, "return_right_mm")
    _optional_non_negative(measurements.overlap_mm, "overlap_mm")
    _optional_non_negative(measurements.pooling_mm, "pooling_mm")

    if measurements.panel_configuration not in PANEL_CONFIGURATIONS:
        raise ValidationError(
            f"panel_configuration must be one of {', '.join(PANEL_CONFIGURATIONS)}",
            field="panel_configuration",
            code=ValidationError.OUT_OF_RANGE,
            details={"received": measurements.panel_configuration},
        )


def validate_template(template: Template) -> None:
    """Validate template allowances (all in centimeters)."""
    require_non_negative(template.header_hem_cm, "header_hem_cm")
    require_non_negative(template.bottom_hem_cm, "bottom_hem_cm")
    require_non_negative(template.side_hem_cm, "side_hem_cm")
    require_non_negative(template.waste_percentage, "waste_percentage")

    _optional_non_negative(template.seam_hem_cm, "seam_hem_cm")
    _optional_non_negative(template.default_returns_cm, "default_returns_cm")
    _optional_non_negative(template.default_overlap_cm, "default_overlap_cm")
    _optional_non_negative(template.base_price, "base_price")

    if template.default_fullness_ratio is not None:
        require_positive(template.default_fullness_ratio, "default_fullness_ratio")


def validate_fabric(fabric: Fabric, kind: TreatmentKind) -> None:
    """Validate a fabric; linear treatments also need a positive roll width."""
    require_method(fabric.pricing_method, "fabric.pricing_method")

    if kind is TreatmentKind.LINEAR:
        require_positive(
            fabric.width_cm, "fabric.width_cm",
            "Fabric width is required and must be greater than 0",
        )
    elif fabric.width_cm is not None:
        require_positive(fabric.width_cm, "fabric.width_cm")

    _optional_non_negative(fabric.price_per_meter, "fabric.price_per_meter")
    _optional_non_negative(fabric.price_per_sqm, "fabric.price_per_sqm")
    require_non_negative(fabric.pricing_grid_markup, "fabric.pricing_grid_markup")


def validate_material(material: Material) -> None:
    """Validate an area-treatment material."""
    require_method(material.pricing_method, "material.pricing_method")
    _optional_non_negative(material.price, "material.price")


def validate_option(option: SelectedOption) -> None:
    """Validate a selected option's price and pricing method."""
    require_number(option.price, f"option.{option.option_key}.price")
    require_method(option.pricing_method, f"option.{option.option_key}.pricing_method")
