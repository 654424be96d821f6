"""
Error handling tests for the fabrication calculation engine.

Tests cover the error hierarchy, the fields each error carries, and that
errors propagate without being replaced by defaults.
"""

from dataclasses import replace

import pytest

from fabcalc_app import calculate
from fabcalc_app.errors import (
    CalculationError,
    ConfigurationError,
    FabricationError,
    ValidationError,
)
from fabcalc_app.models import CalculationInput, Measurements, SelectedOption


class TestErrorClassification:
    """Test error classification system."""

    def test_error_hierarchy(self):
        """Test that every engine error derives from FabricationError."""
        base_error = FabricationError("base error")
        assert base_error.recoverable is False
        assert base_error.context == {}

        for error in (
            ValidationError("bad field"),
            ConfigurationError("bad config"),
            CalculationError("bad calc"),
        ):
            assert isinstance(error, FabricationError)
            assert error.recoverable is False

    def test_validation_error_fields(self):
        error = ValidationError(
            "drop_mm is required",
            field="drop_mm",
            code=ValidationError.MISSING_REQUIRED,
            context={"surface": "w1"},
        )
        assert error.field == "drop_mm"
        assert error.code == "MISSING_REQUIRED"
        assert error.details == {}
        assert error.context == {"surface": "w1"}
        assert str(error) == "drop_mm is required"

    def test_configuration_error_fields(self):
        error = ConfigurationError("no fabric", contract="fabric", missing_fields=["fabric"])
        assert error.contract == "fabric"
        assert error.missing_fields == ["fabric"]
        assert ConfigurationError("x").missing_fields == []

    def test_calculation_error_codes(self):
        assert CalculationError.UNSUPPORTED_CATEGORY == "unsupported_category"
        assert CalculationError.OPTION_PRICING == "option_pricing"
        assert CalculationError.UNKNOWN_PRICING_METHOD == "unknown_pricing_method"

        error = CalculationError("x", code=CalculationError.OPTION_PRICING, details={"k": 1})
        assert error.details == {"k": 1}


class TestErrorPropagation:
    """Test that the engine raises instead of defaulting."""

    @pytest.fixture
    def curtain_input(self, curtain_measurements, curtain_template, fabric_140):
        return CalculationInput(
            category="curtains",
            measurements=curtain_measurements,
            template=curtain_template,
            fabric=fabric_140,
        )

    @pytest.mark.parametrize("category", ["wallpaper", "", None, "carpet"])
    def test_unsupported_categories(self, curtain_input, category):
        with pytest.raises(CalculationError) as exc_info:
            calculate(replace(curtain_input, category=category))
        assert exc_info.value.details == {"category": category}

    def test_missing_hem_is_not_zero(self, curtain_input):
        template = replace(curtain_input.template, bottom_hem_cm=None)
        with pytest.raises(ValidationError) as exc_info:
            calculate(replace(curtain_input, template=template))
        assert exc_info.value.field == "bottom_hem_cm"

    def test_negative_pooling(self, curtain_input):
        measurements = Measurements(rail_width_mm=2000, drop_mm=2400, heading_fullness=2.5, pooling_mm=-10)
        with pytest.raises(ValidationError):
            calculate(replace(curtain_input, measurements=measurements))

    def test_option_with_string_price(self, curtain_input):
        option = SelectedOption(
            option_id="o", option_key="track", value_id="v", value_label="Track",
            price="85", pricing_method="fixed",
        )
        with pytest.raises(ValidationError) as exc_info:
            calculate(replace(curtain_input, options=(option,)))
        assert exc_info.value.code == ValidationError.INVALID_TYPE

    def test_catching_base_class(self, curtain_input):
        """Callers can handle every engine error through the base class."""
        with pytest.raises(FabricationError):
            calculate(replace(curtain_input, fabric=None))
