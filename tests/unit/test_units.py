"""Tests for unit conversion and rounding helpers."""

import pytest

from fabcalc_app.models import FormulaStep
from fabcalc_app.utils.units import cm_to_m, cm_to_mm, format_number, mm_to_cm, mm_to_m, round_to, sqm_from_cm


class TestConversions:
    """Test length conversions."""

    def test_mm_to_cm(self):
        assert mm_to_cm(2000) == 200
        assert mm_to_cm(15) == 1.5

    def test_cm_to_m(self):
        assert cm_to_m(1044) == pytest.approx(10.44)

    def test_mm_to_m(self):
        assert mm_to_m(2400) == 2.4

    def test_cm_to_mm(self):
        assert cm_to_mm(15) == 150

    def test_sqm_from_cm(self):
        assert sqm_from_cm(108, 138) == pytest.approx(1.4904)


class TestRoundTo:
    """Test half-up rounding."""

    def test_rounds_half_up(self):
        """Halves round away from zero, as written on a quote."""
        assert round_to(1.005, 2) == 1.01
        assert round_to(2.675, 2) == 2.68
        assert round_to(0.125, 2) == 0.13

    def test_rounds_down_below_half(self):
        assert round_to(1.4904, 2) == 1.49

    def test_decimals(self):
        assert round_to(10.44, 1) == 10.4
        assert round_to(10.45, 1) == 10.5
        assert round_to(3.7, 0) == 4.0

    def test_removes_float_noise(self):
        assert round_to(0.1 + 0.2, 2) == 0.3

    def test_negative_values(self):
        assert round_to(-1.005, 2) == -1.01


class TestFormatNumber:
    """Test breakdown number formatting."""

    @pytest.mark.parametrize("value,expected", [
        (12345.67, "12345.67"),
        (1000000.0, "1000000"),
        (500.0, "500"),
        (10.4, "10.4"),
        (10.4400001, "10.44"),
        (1.005, "1.01"),
        (-0.0, "0"),
    ])
    def test_values(self, value, expected):
        assert format_number(value) == expected

    def test_decimals(self):
        assert format_number(1.23456, decimals=3) == "1.235"

    def test_formula_step_text(self):
        step = FormulaStep(label="Fabric cost", formula="20 x 617.28", result=12345.6, unit="")
        assert str(step) == "Fabric cost: 20 x 617.28 = 12345.6"
