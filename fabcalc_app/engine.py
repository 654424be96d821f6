"""
Main calculation engine.

Turns a CalculationInput into a CalculationResult:
Classify → Validate → Geometry (linear or area) → Costs → Waste → Breakdown
"""

from typing import Optional, Union

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .data.validators import (
    validate_fabric,
    validate_material,
    validate_measurements,
    validate_option,
    validate_template,
)
from .errors import CalculationError, ConfigurationError
from .formulas.area import AreaResult, calculate_area
from .formulas.common import fmt
from .formulas.linear import LinearResult, calculate_linear
from .formulas.options import calculate_options_cost
from .formulas.pricing import calculate_fabric_cost, calculate_material_cost
from .logging.config import get_audit_logger, log_calculation
from .models.categories import TreatmentKind, classify, normalize_category
from .models.contracts import CalculationInput, CalculationResult, FormulaBreakdown
from .utils.units import mm_to_cm, round_to

logger = structlog.get_logger(__name__)
audit_logger = get_audit_logger(__name__)


class CalculationEngine:
    """
    Fabrication requirement and cost calculator.

    Stateless apart from its configuration: identical inputs always give
    equal results, and a failing calculation raises instead of returning a
    partial result.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()

    @property
    def decimals(self) -> int:
        return self.config.rounding.decimals

    def calculate(self, calc_input: CalculationInput) -> CalculationResult:
        """
        Calculate the fabrication requirement and itemized cost of one treatment.

        Args:
            calc_input: Measurements, template, fabric/material and options

        Returns:
            CalculationResult with costs and formula breakdown

        Raises:
            CalculationError: For unsupported categories or invalid pricing
            ConfigurationError: When a required contract or field is missing
            ValidationError: When a numeric field is missing or out of range
        """
        category = normalize_category(calc_input.category)
        kind = classify(category)

        if kind is TreatmentKind.UNSUPPORTED:
            logger.warning("Unsupported treatment category", category=calc_input.category)
            raise CalculationError(
                f"Calculation not yet supported for category: {calc_input.category}",
                code=CalculationError.UNSUPPORTED_CATEGORY,
                details={"category": calc_input.category},
            )

        self._validate(calc_input, kind)

        if kind is TreatmentKind.LINEAR:
            geometry = calculate_linear(
                calc_input.measurements, calc_input.template, calc_input.fabric, self.decimals
            )
        else:
            geometry = calculate_area(calc_input.measurements, calc_input.template, self.decimals)

        result = self._price(calc_input, category, kind, geometry)

        log_calculation(
            audit_logger,
            category=category,
            kind=kind.value,
            total=result.total,
            context=result.formula_breakdown.values,
        )
        return result

    def _validate(self, calc_input: CalculationInput, kind: TreatmentKind) -> None:
        validate_measurements(calc_input.measurements)
        validate_template(calc_input.template)

        if kind is TreatmentKind.LINEAR and calc_input.fabric is None:
            raise ConfigurationError(
                f"A fabric is required for {calc_input.category} calculations",
                contract="fabric",
                missing_fields=["fabric"],
            )

        if calc_input.fabric is not None:
            validate_fabric(calc_input.fabric, kind)
        if calc_input.material is not None:
            validate_material(calc_input.material)
        for option in calc_input.options:
            validate_option(option)

    def _price(
        self,
        calc_input: CalculationInput,
        category: str,
        kind: TreatmentKind,
        geometry: Union[LinearResult, AreaResult],
    ) -> CalculationResult:
        decimals = self.decimals
        template = calc_input.template
        width_cm = mm_to_cm(calc_input.measurements.rail_width_mm)
        drop_cm = mm_to_cm(calc_input.measurements.drop_mm)

        fabric_cost = 0.0
        material_cost = 0.0

        if isinstance(geometry, LinearResult):
            linear_meters: Optional[float] = geometry.linear_meters
            sqm: Optional[float] = None
            fabric_cost = calculate_fabric_cost(
                calc_input.fabric,
                linear_meters,
                width_cm=geometry.total_width_cm,
                drop_cm=drop_cm,
                decimals=decimals,
            )
        else:
            linear_meters = None
            sqm = geometry.sqm
            if calc_input.material is not None:
                material_cost = calculate_material_cost(
                    calc_input.material, sqm, width_cm, drop_cm, decimals
                )
            elif calc_input.fabric is not None:
                fabric_cost = calculate_fabric_cost(
                    calc_input.fabric,
                    None,
                    width_cm=width_cm,
                    drop_cm=drop_cm,
                    sqm=sqm,
                    decimals=decimals,
                )

        base_cost = round_to(template.base_price or 0.0, decimals)
        base_amount = fabric_cost + material_cost + base_cost

        options_cost, priced_options = calculate_options_cost(
            calc_input.options,
            category,
            linear_meters=linear_meters,
            sqm=sqm,
            base_amount=base_amount,
            width_cm=width_cm,
            drop_cm=drop_cm,
            decimals=decimals,
        )

        subtotal = round_to(fabric_cost + material_cost + options_cost + base_cost, decimals)
        waste_amount = round_to(subtotal * template.waste_percentage / 100, decimals)
        total = round_to(subtotal + waste_amount, decimals)

        cost_steps = [
            f"Fabric cost: {fmt(fabric_cost)}",
            f"Material cost: {fmt(material_cost)}",
        ]
        cost_steps.extend(
            f"Option {option.option_key} ({option.value_label or option.value_id}, "
            f"{option.pricing_method}): {fmt(cost)}"
            for option, cost in priced_options
        )
        cost_steps.extend([
            f"Options cost: {fmt(options_cost)}",
            f"Base cost: {fmt(base_cost)}",
            f"Subtotal: {fmt(fabric_cost)} + {fmt(material_cost)} + "
            f"{fmt(options_cost)} + {fmt(base_cost)} = {fmt(subtotal)}",
            f"Waste: {fmt(subtotal)} x {fmt(template.waste_percentage)}% = {fmt(waste_amount)}",
            f"Total: {fmt(subtotal)} + {fmt(waste_amount)} = {fmt(total)}",
        ])

        values = dict(geometry.breakdown.values)
        values.update({
            "category": category,
            "calculation_kind": kind.value,
            "fabric_cost": fabric_cost,
            "material_cost": material_cost,
            "options_cost": options_cost,
            "option_costs": {option.option_key: cost for option, cost in priced_options},
            "base_cost": base_cost,
            "subtotal": subtotal,
            "waste_percentage": template.waste_percentage,
            "waste_amount": waste_amount,
            "total": total,
        })

        breakdown = FormulaBreakdown(
            steps=geometry.breakdown.steps + tuple(cost_steps),
            values=values,
            summary=f"{geometry.breakdown.summary}; total {fmt(total)}",
        )

        if isinstance(geometry, LinearResult):
            return CalculationResult(
                width_cm=width_cm,
                drop_cm=drop_cm,
                fabric_cost=fabric_cost,
                material_cost=material_cost,
                options_cost=options_cost,
                base_cost=base_cost,
                subtotal=subtotal,
                waste_amount=waste_amount,
                total=total,
                formula_breakdown=breakdown,
                linear_meters=geometry.linear_meters,
                widths_required=geometry.widths_required,
                seams_count=geometry.seams_count,
                total_drop_cm=geometry.total_drop_cm,
                total_width_cm=geometry.total_width_cm,
            )

        return CalculationResult(
            width_cm=width_cm,
            drop_cm=drop_cm,
            fabric_cost=fabric_cost,
            material_cost=material_cost,
            options_cost=options_cost,
            base_cost=base_cost,
            subtotal=subtotal,
            waste_amount=waste_amount,
            total=total,
            formula_breakdown=breakdown,
            effective_width_cm=geometry.effective_width_cm,
            effective_height_cm=geometry.effective_height_cm,
            sqm=geometry.sqm,
        )


def calculate(calc_input: CalculationInput, config: Optional[DefaultConfig] = None) -> CalculationResult:
    """Calculate one treatment with a fresh engine."""
    return CalculationEngine(config).calculate(calc_input)
