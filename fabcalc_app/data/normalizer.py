"""
Contract builders for stored worksheet records.

Stored records use several spellings for the same field and keep some
lengths in centimeters. The builders here accept those aliases, convert
units, and return a BuildResult rather than raising. No value is invented
for a missing required field: the build fails and names what is missing.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Optional

import structlog

from ..config.defaults import DefaultConfig, get_default_config
from ..formulas.grid import normalize_grid_data
from ..models.categories import TreatmentKind, classify, infer_category_from_name, normalize_category
from ..models.contracts import (
    CalculationInput,
    Fabric,
    Material,
    Measurements,
    SelectedOption,
    Template,
)
from ..utils.units import cm_to_mm

logger = structlog.get_logger(__name__)


@dataclass
class BuildResult:
    """Result of building a contract from a stored record."""
    # Built contract (None if the build failed)
    contract: Any = None
    # Processing metadata
    success: bool = True
    error_msg: Optional[str] = None
    missing_fields: list[str] = field(default_factory=list)

    @classmethod
    def ok(cls, contract: Any) -> "BuildResult":
        """Create successful result with the built contract."""
        return cls(contract=contract, success=True)

    @classmethod
    def failed(cls, error_msg: str, missing_fields: Optional[list[str]] = None) -> "BuildResult":
        """Create error result."""
        return cls(success=False, error_msg=error_msg, missing_fields=missing_fields or [])


def parse_number(value: Any) -> Optional[float]:
    """Parse a stored numeric value ('140', 140, '2.5'); None when absent or unparseable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def parse_flag(value: Any) -> Optional[bool]:
    """Parse a stored boolean (True, 'true', 'False', 0); absent is False, unrecognised is None."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        return {"true": True, "false": False, "": False}.get(value.strip().lower())
    return None


def first_present(record: dict[str, Any], *keys: str) -> Any:
    """Value of the first key whose value is not None."""
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None


class ContractBuilder:
    """
    Builds calculation contracts from stored worksheet records.

    Each build_* method returns a BuildResult; build_input combines them
    into a CalculationInput for one worksheet.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        self.logger = logger

    def _grid(self, record: dict[str, Any], *keys: str):
        raw = first_present(record, *keys)
        if raw is None:
            return None
        return normalize_grid_data(raw, self.config.grid.mm_threshold)

    def build_measurements(self, record: Optional[dict[str, Any]]) -> BuildResult:
        """
        Build Measurements from a stored measurement record.

        Rail width and drop are stored in mm. Returns, overlap and pooling
        are stored in cm and converted to mm.
        """
        if not record:
            return BuildResult.failed("Measurements are missing", ["measurements"])

        rail_width_mm = parse_number(first_present(record, "rail_width", "rail_width_mm", "width"))
        drop_mm = parse_number(first_present(record, "drop", "drop_mm", "height"))

        missing = []
        if not rail_width_mm:
            missing.append("rail_width")
        if not drop_mm:
            missing.append("drop")
        if missing:
            return BuildResult.failed(
                f"Measurements missing or invalid: {', '.join(missing)}", missing
            )

        def optional_cm_as_mm(*keys: str) -> Optional[float]:
            value = parse_number(first_present(record, *keys))
            return cm_to_mm(value) if value is not None else None

        invalid = []
        panel_configuration = first_present(record, "panel_configuration", "curtain_type") or "single"
        if panel_configuration not in ("single", "pair"):
            invalid.append("panel_configuration")
        fabric_rotated = parse_flag(record.get("fabric_rotated"))
        if fabric_rotated is None:
            invalid.append("fabric_rotated")
        if invalid:
            return BuildResult.failed(
                f"Measurements have invalid values: {', '.join(invalid)}", invalid
            )

        return BuildResult.ok(Measurements(
            rail_width_mm=rail_width_mm,
            drop_mm=drop_mm,
            heading_fullness=parse_number(first_present(record, "heading_fullness", "fullness")),
            return_left_mm=optional_cm_as_mm("return_left"),
            return_right_mm=optional_cm_as_mm("return_right"),
            overlap_mm=optional_cm_as_mm("overlap"),
            pooling_mm=optional_cm_as_mm("pooling_amount", "pooling"),
            panel_configuration=panel_configuration,
            fabric_rotated=fabric_rotated,
        ))

    def build_template(self, record: Optional[dict[str, Any]], category: str) -> BuildResult:
        """Build a Template; hems, waste and pricing type are required."""
        if not record:
            return BuildResult.failed("Template is missing", ["template"])

        required = {
            "header_hem": first_present(record, "header_hem_cm", "header_hem", "header_allowance"),
            "bottom_hem": first_present(record, "bottom_hem_cm", "bottom_hem", "bottom_allowance"),
            "side_hem": first_present(record, "side_hem_cm", "side_hem", "side_hems"),
            "waste_percentage": first_present(record, "waste_percentage", "waste_percent", "waste"),
        }
        parsed = {name: parse_number(value) for name, value in required.items()}
        missing = [name for name, value in parsed.items() if value is None]
        if not record.get("pricing_type"):
            missing.append("pricing_type")

        if missing:
            self.logger.debug(
                "Template missing required fields",
                template_id=record.get("id"),
                missing=missing,
            )
            return BuildResult.failed(
                f"Template {record.get('name') or record.get('id') or '(unnamed)'} missing "
                f"required fields: {', '.join(missing)}",
                missing,
            )

        return BuildResult.ok(Template(
            header_hem_cm=parsed["header_hem"],
            bottom_hem_cm=parsed["bottom_hem"],
            side_hem_cm=parsed["side_hem"],
            waste_percentage=parsed["waste_percentage"],
            pricing_type=record["pricing_type"],
            seam_hem_cm=parse_number(
                first_present(record, "seam_hem_cm", "seam_hem", "seam_allowance", "seam_hems")
            ),
            default_returns_cm=parse_number(record.get("default_returns_cm")),
            default_fullness_ratio=parse_number(
                first_present(record, "fullness_ratio", "default_fullness_ratio")
            ),
            default_overlap_cm=parse_number(first_present(record, "default_overlap_cm", "overlap")),
            base_price=parse_number(record.get("base_price")),
            id=str(record.get("id") or ""),
            name=str(record.get("name") or ""),
            treatment_category=category,
        ))

    def build_fabric(self, record: Optional[dict[str, Any]], require_width: bool = True) -> BuildResult:
        """Build a Fabric; width is required for linear treatments."""
        if not record:
            return BuildResult.failed("Fabric is missing", ["fabric"])

        width_cm = parse_number(first_present(record, "fabric_width", "width_cm", "width"))
        missing = []
        if require_width and not width_cm:
            missing.append("fabric_width")
        if not record.get("pricing_method"):
            missing.append("pricing_method")
        if missing:
            return BuildResult.failed(
                f"Fabric {record.get('name') or record.get('id')} missing or invalid: "
                f"{', '.join(missing)}",
                missing,
            )

        return BuildResult.ok(Fabric(
            pricing_method=record["pricing_method"],
            width_cm=width_cm or None,
            price_per_meter=parse_number(
                first_present(record, "price_per_meter", "selling_price", "unit_price")
            ),
            price_per_sqm=parse_number(record.get("price_per_sqm")),
            pricing_grid=self._grid(record, "pricing_grid_data", "resolved_grid_data"),
            pricing_grid_markup=parse_number(record.get("pricing_grid_markup")) or 0.0,
            id=str(first_present(record, "id", "fabric_id") or ""),
            name=str(record.get("name") or ""),
        ))

    def build_material(self, record: Optional[dict[str, Any]]) -> BuildResult:
        """Build a Material for an area treatment."""
        if not record:
            return BuildResult.failed("Material is missing", ["material"])

        if not record.get("pricing_method"):
            return BuildResult.failed(
                f"Material {record.get('name') or record.get('id')} missing pricing_method",
                ["pricing_method"],
            )

        return BuildResult.ok(Material(
            pricing_method=record["pricing_method"],
            price=parse_number(
                first_present(record, "price", "price_per_sqm", "selling_price", "unit_price")
            ),
            pricing_grid=self._grid(record, "pricing_grid_data", "resolved_grid_data"),
            id=str(record.get("id") or ""),
            name=str(record.get("name") or ""),
        ))

    def build_options(self, records: Optional[list[dict[str, Any]]]) -> list[SelectedOption]:
        """Build selected options, skipping any without a usable price or pricing method."""
        if not isinstance(records, list):
            return []

        options = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                continue

            price = parse_number(record.get("price"))
            pricing_method = first_present(record, "pricingMethod", "pricing_method")
            if price is None or pricing_method is None:
                self.logger.debug(
                    "Option skipped",
                    option_name=record.get("name"),
                    index=index,
                    missing_price=price is None,
                    missing_pricing_method=pricing_method is None,
                )
                continue

            options.append(SelectedOption(
                option_id=str(first_present(record, "option_id", "id") or f"option_{index}"),
                option_key=str(
                    first_present(record, "optionKey", "option_key", "name") or f"key_{index}"
                ),
                value_id=str(first_present(record, "value_id", "id") or f"value_{index}"),
                value_label=str(first_present(record, "value_label", "name") or "Unknown"),
                price=price,
                pricing_method=pricing_method,
                pricing_grid=self._grid(record, "pricingGridData", "pricing_grid_data"),
            ))

        return options

    def build_input(self, worksheet: dict[str, Any]) -> BuildResult:
        """
        Build a CalculationInput from one stored worksheet.

        Args:
            worksheet: Record with treatment_category, measurements, template,
                fabric, material and options (camelCase aliases accepted)

        Returns:
            BuildResult whose contract is a CalculationInput
        """
        template_record = first_present(worksheet, "template", "selected_template", "selectedTemplate")
        raw_category = first_present(worksheet, "treatment_category", "treatmentCategory", "category")
        if raw_category is None and template_record:
            raw_category = first_present(template_record, "treatment_category", "curtain_type")
            if raw_category is None:
                raw_category = infer_category_from_name(template_record.get("name"))
        category = normalize_category(raw_category)
        kind = classify(category)
        if kind is TreatmentKind.UNSUPPORTED:
            return BuildResult.failed(f"Unsupported treatment category: {raw_category}", ["treatment_category"])

        measurements = self.build_measurements(worksheet.get("measurements"))
        if not measurements.success:
            return measurements

        template = self.build_template(template_record, category)
        if not template.success:
            return template

        fabric_record = first_present(worksheet, "fabric", "selected_fabric", "selectedFabric")
        fabric = None
        if kind is TreatmentKind.LINEAR or fabric_record:
            fabric_result = self.build_fabric(fabric_record, require_width=kind is TreatmentKind.LINEAR)
            if not fabric_result.success:
                return fabric_result
            fabric = fabric_result.contract

        material = None
        material_record = first_present(worksheet, "material", "selected_material", "selectedMaterial")
        if material_record:
            material_result = self.build_material(material_record)
            if not material_result.success:
                return material_result
            material = material_result.contract

        options = self.build_options(
            first_present(worksheet, "options", "selected_options", "selectedOptions")
        )

        return BuildResult.ok(CalculationInput(
            category=category,
            measurements=measurements.contract,
            template=template.contract,
            fabric=fabric,
            material=material,
            options=tuple(options),
        ))
