"""Pytest configuration and shared fixtures."""

import pytest
from typing import Any

from fabcalc_app.models import Fabric, Material, Measurements, Template


@pytest.fixture
def curtain_template() -> Template:
    """Curtain template with 8cm header, 10cm bottom, 4cm side and 4cm seam hems."""
    return Template(
        header_hem_cm=8,
        bottom_hem_cm=10,
        side_hem_cm=4,
        seam_hem_cm=4,
        waste_percentage=0,
        pricing_type="per_running_meter",
        id="tpl-curtain",
        name="Pinch Pleat",
        treatment_category="curtains",
    )


@pytest.fixture
def blind_template() -> Template:
    """Roller blind template with 8cm header, 10cm bottom and 4cm side hems."""
    return Template(
        header_hem_cm=8,
        bottom_hem_cm=10,
        side_hem_cm=4,
        waste_percentage=0,
        pricing_type="per_sqm",
        id="tpl-roller",
        name="Roller Blind",
        treatment_category="roller_blinds",
    )


@pytest.fixture
def fabric_140() -> Fabric:
    """140cm wide fabric at 20.00 per running meter."""
    return Fabric(
        pricing_method="per_running_meter",
        width_cm=140,
        price_per_meter=20,
        id="fab-linen",
        name="Linen",
    )


@pytest.fixture
def material_per_sqm() -> Material:
    """Blind material at 50.00 per square meter."""
    return Material(pricing_method="per_sqm", price=50, id="mat-screen", name="Sunscreen")


@pytest.fixture
def curtain_measurements() -> Measurements:
    """2000mm rail, 2400mm drop at 2.5 fullness."""
    return Measurements(rail_width_mm=2000, drop_mm=2400, heading_fullness=2.5)


@pytest.fixture
def blind_measurements() -> Measurements:
    """1000mm wide, 1200mm drop."""
    return Measurements(rail_width_mm=1000, drop_mm=1200)


@pytest.fixture
def sample_quote_items() -> list[dict[str, Any]]:
    """Quote items as stored on a quote."""
    return [
        {"id": "item-1", "name": "Roller Blind - Standard", "total": 262.50},
        {"id": "item-2", "name": "Curtain Fabric", "description": "Premium fabric", "total": 225.00},
        {"id": "item-3", "name": "Installation Labour", "total": 150.00},
        {"id": "item-4", "name": "Roman Blind Making", "total": 100.00},
    ]


@pytest.fixture
def curtain_worksheet() -> dict[str, Any]:
    """Stored curtain worksheet record using legacy field names."""
    return {
        "id": "ws-001",
        "treatment_category": "curtains",
        "measurements": {
            "rail_width": "2000",
            "drop": "2400",
            "heading_fullness": "2.5",
        },
        "template": {
            "id": "tpl-curtain",
            "name": "Pinch Pleat Curtain",
            "header_allowance": 8,
            "bottom_hem": 10,
            "side_hems": 4,
            "seam_hems": 4,
            "waste_percent": 0,
            "pricing_type": "per_metre",
        },
        "fabric": {
            "id": "fab-linen",
            "name": "Linen",
            "fabric_width": 140,
            "pricing_method": "per_running_meter",
            "selling_price": 20,
        },
        "options": [],
    }
