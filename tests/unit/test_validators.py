"""Tests for calculation contract validation."""

import math

import pytest

from fabcalc_app.data.validators import (
    require_method,
    require_non_negative,
    require_number,
    require_positive,
    validate_fabric,
    validate_material,
    validate_measurements,
    validate_option,
    validate_template,
)
from fabcalc_app.errors import ValidationError
from fabcalc_app.models import Fabric, Material, Measurements, SelectedOption, Template, TreatmentKind


class TestRequireNumber:
    """Test numeric field checks."""

    def test_accepts_numbers(self):
        assert require_number(5, "x") == 5.0
        assert require_number(2.5, "x") == 2.5
        assert require_number(0, "x") == 0.0

    def test_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            require_number(None, "drop_mm")
        assert exc_info.value.field == "drop_mm"
        assert exc_info.value.code == ValidationError.MISSING_REQUIRED

    @pytest.mark.parametrize("value", ["120", True, [1], math.nan, math.inf])
    def test_rejects_non_numbers(self, value):
        """Strings are rejected rather than parsed."""
        with pytest.raises(ValidationError) as exc_info:
            require_number(value, "rail_width_mm")
        assert exc_info.value.code == ValidationError.INVALID_TYPE

    def test_custom_message(self):
        with pytest.raises(ValidationError, match="Rail width is required"):
            require_number(None, "rail_width_mm", "Rail width is required")


class TestRanges:
    """Test positive and non-negative checks."""

    def test_positive(self):
        assert require_positive(1, "x") == 1.0
        with pytest.raises(ValidationError) as exc_info:
            require_positive(0, "x")
        assert exc_info.value.code == ValidationError.OUT_OF_RANGE
        assert exc_info.value.details == {"received": 0.0}

    def test_non_negative(self):
        assert require_non_negative(0, "x") == 0.0
        with pytest.raises(ValidationError) as exc_info:
            require_non_negative(-1, "x")
        assert exc_info.value.code == ValidationError.OUT_OF_RANGE

    def test_method(self):
        assert require_method("fixed", "m") == "fixed"
        with pytest.raises(ValidationError):
            require_method("", "m")
        with pytest.raises(ValidationError):
            require_method(5, "m")


class TestValidateMeasurements:
    """Test measurement validation."""

    def test_valid(self, curtain_measurements):
        validate_measurements(curtain_measurements)

    def test_zero_rail_width(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_measurements(Measurements(rail_width_mm=0, drop_mm=2400))
        assert exc_info.value.field == "rail_width_mm"

    def test_missing_drop(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_measurements(Measurements(rail_width_mm=2000, drop_mm=None))
        assert exc_info.value.field == "drop_mm"
        assert exc_info.value.code == ValidationError.MISSING_REQUIRED

    def test_string_measurement_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_measurements(Measurements(rail_width_mm="2000", drop_mm=2400))
        assert exc_info.value.code == ValidationError.INVALID_TYPE

    def test_negative_return(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_measurements(Measurements(rail_width_mm=2000, drop_mm=2400, return_left_mm=-10))
        assert exc_info.value.field == "return_left_mm"

    def test_zero_fullness(self):
        with pytest.raises(ValidationError):
            validate_measurements(Measurements(rail_width_mm=2000, drop_mm=2400, heading_fullness=0))

    def test_unknown_panel_configuration(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_measurements(
                Measurements(rail_width_mm=2000, drop_mm=2400, panel_configuration="triple")
            )
        assert exc_info.value.field == "panel_configuration"


class TestValidateTemplate:
    """Test template validation."""

    def test_valid(self, curtain_template, blind_template):
        validate_template(curtain_template)
        validate_template(blind_template)

    def test_missing_hem(self):
        template = Template(
            header_hem_cm=None, bottom_hem_cm=10, side_hem_cm=4,
            waste_percentage=0, pricing_type="per_sqm",
        )
        with pytest.raises(ValidationError) as exc_info:
            validate_template(template)
        assert exc_info.value.field == "header_hem_cm"

    def test_negative_waste(self):
        template = Template(
            header_hem_cm=8, bottom_hem_cm=10, side_hem_cm=4,
            waste_percentage=-5, pricing_type="per_sqm",
        )
        with pytest.raises(ValidationError) as exc_info:
            validate_template(template)
        assert exc_info.value.field == "waste_percentage"

    def test_zero_default_fullness(self):
        template = Template(
            header_hem_cm=8, bottom_hem_cm=10, side_hem_cm=4,
            waste_percentage=0, pricing_type="per_sqm", default_fullness_ratio=0,
        )
        with pytest.raises(ValidationError):
            validate_template(template)


class TestValidateFabricAndMaterial:
    """Test fabric, material and option validation."""

    def test_linear_fabric_requires_width(self):
        fabric = Fabric(pricing_method="per_meter", price_per_meter=20)
        with pytest.raises(ValidationError) as exc_info:
            validate_fabric(fabric, TreatmentKind.LINEAR)
        assert exc_info.value.field == "fabric.width_cm"

    def test_area_fabric_without_width(self):
        validate_fabric(Fabric(pricing_method="per_sqm", price_per_sqm=30), TreatmentKind.AREA)

    def test_negative_fabric_price(self):
        with pytest.raises(ValidationError):
            validate_fabric(
                Fabric(pricing_method="per_meter", width_cm=140, price_per_meter=-1),
                TreatmentKind.LINEAR,
            )

    def test_material(self, material_per_sqm):
        validate_material(material_per_sqm)
        with pytest.raises(ValidationError):
            validate_material(Material(pricing_method="per_sqm", price=-1))

    def test_option(self):
        option = SelectedOption(
            option_id="o1", option_key="lining", value_id="v1", value_label="Blackout",
            price=12, pricing_method="per_meter",
        )
        validate_option(option)

        with pytest.raises(ValidationError) as exc_info:
            validate_option(SelectedOption(
                option_id="o1", option_key="lining", value_id="v1", value_label="Blackout",
                price=None, pricing_method="per_meter",
            ))
        assert exc_info.value.field == "option.lining.price"
