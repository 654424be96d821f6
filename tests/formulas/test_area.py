"""Tests for area material calculation."""

from dataclasses import replace

import pytest

from fabcalc_app.formulas.area import calculate_area
from fabcalc_app.models import Measurements


class TestAreaCalculation:
    """Test effective size and square meters."""

    def test_reference_blind(self, blind_measurements, blind_template):
        """1000x1200mm with 8/10/4cm hems."""
        result = calculate_area(blind_measurements, blind_template)

        assert result.effective_width_cm == pytest.approx(108)
        assert result.effective_height_cm == pytest.approx(138)
        assert result.sqm == pytest.approx(1.49)
        assert result.sqm_raw == pytest.approx(1.4904)

    def test_no_hems(self, blind_template):
        template = replace(blind_template, header_hem_cm=0, bottom_hem_cm=0, side_hem_cm=0)
        result = calculate_area(Measurements(rail_width_mm=1500, drop_mm=2000), template)

        assert result.sqm == pytest.approx(3.0)

    def test_decimals(self, blind_measurements, blind_template):
        result = calculate_area(blind_measurements, blind_template, decimals=3)
        assert result.sqm == pytest.approx(1.49)
        assert calculate_area(blind_measurements, blind_template, decimals=1).sqm == pytest.approx(1.5)

    def test_breakdown(self, blind_measurements, blind_template):
        result = calculate_area(blind_measurements, blind_template)

        assert result.breakdown.steps[0] == "Effective width: 100 + 4 x 2 (side hems) = 108cm"
        assert result.breakdown.values["sqm_raw"] == pytest.approx(1.4904)
        assert result.breakdown.summary == "AREA: 108cm x 138cm = 1.49m²"
