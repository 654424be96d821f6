"""Tests for treatment category classification."""

import pytest

from fabcalc_app.models.categories import (
    AREA_TYPES,
    LINEAR_TYPES,
    TreatmentKind,
    classify,
    infer_category_from_name,
    is_area_type,
    is_linear_type,
    is_unsupported_type,
)


class TestClassify:
    """Test the closed category classifier."""

    @pytest.mark.parametrize("category", ["curtains", "roman_blinds"])
    def test_linear_categories(self, category):
        assert classify(category) is TreatmentKind.LINEAR
        assert is_linear_type(category)
        assert not is_area_type(category)
        assert not is_unsupported_type(category)

    @pytest.mark.parametrize("category", sorted(AREA_TYPES))
    def test_area_categories(self, category):
        assert classify(category) is TreatmentKind.AREA
        assert is_area_type(category)
        assert not is_linear_type(category)

    @pytest.mark.parametrize("category", ["wallpaper", "carpet", "", None, "curtain"])
    def test_unsupported_categories(self, category):
        assert classify(category) is TreatmentKind.UNSUPPORTED
        assert is_unsupported_type(category)

    def test_input_is_normalised(self):
        assert classify("  Curtains ") is TreatmentKind.LINEAR
        assert classify("ROLLER_BLINDS") is TreatmentKind.AREA

    def test_sets_are_disjoint(self):
        assert not LINEAR_TYPES & AREA_TYPES

    def test_kind_values(self):
        assert TreatmentKind.LINEAR.value == "linear"
        assert TreatmentKind.AREA == "area"


class TestInferCategoryFromName:
    """Test keyword inference from product names."""

    @pytest.mark.parametrize("name,expected", [
        ("Pinch Pleat Curtains", "curtains"),
        ("Flat Roman Blind", "roman_blinds"),
        ("Blockout Roller", "roller_blinds"),
        ("50mm Venetian", "venetian_blinds"),
        ("Vertical Drapes", "vertical_blinds"),
        ("Honeycomb Shade", "cellular_blinds"),
        ("Day & Night Blind", "zebra_blinds"),
        ("Plantation Shutter", "plantation_shutters"),
        ("Cafe Shutters", "shutters"),
        ("Panel Glide Track", "panel_glide"),
        ("Folding Arm Awning", "awning"),
        ("Feature Wallpaper", "wallpaper"),
        ("Sheer Blind", "roller_blinds"),
    ])
    def test_keywords(self, name, expected):
        assert infer_category_from_name(name) == expected

    def test_no_match(self):
        assert infer_category_from_name("Installation") is None
        assert infer_category_from_name(None) is None
        assert infer_category_from_name("") is None
