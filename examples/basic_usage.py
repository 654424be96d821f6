#!/usr/bin/env python3
"""
Basic Usage Example - Fabcalc Calculation Engine

This script demonstrates the basic usage of the fabrication calculation
engine. It shows how to:
- Price a pair of curtains (linear treatment)
- Price a roller blind (area treatment)
- Build contracts from a stored worksheet record
- Apply a quote discount, with account-specific fabric keywords

Run: python examples/basic_usage.py
"""

from fabcalc_app import DiscountAllocator, calculate, calculate_discount_amount
from fabcalc_app.config.loader import ConfigLoader
from fabcalc_app.data.normalizer import ContractBuilder
from fabcalc_app.errors import FabricationError
from fabcalc_app.logging import configure_logging
from fabcalc_app.models import (
    CalculationInput,
    CalculationResult,
    DiscountConfig,
    Fabric,
    Material,
    Measurements,
    SelectedOption,
    Template,
)


def print_result(title: str, result: CalculationResult) -> None:
    """Print a calculation result with its formula steps."""
    print(f"   {title}")
    for line in result.formula_breakdown.steps:
        print(f"     {line}")
    print(f"   Total: {result.total:.2f}")
    print()


def curtain_example() -> CalculationResult:
    """Pinch pleat curtains on a 2m rail."""
    calc_input = CalculationInput(
        category="curtains",
        measurements=Measurements(rail_width_mm=2000, drop_mm=2400, heading_fullness=2.5),
        template=Template(
            header_hem_cm=8,
            bottom_hem_cm=10,
            side_hem_cm=4,
            seam_hem_cm=4,
            waste_percentage=5,
            pricing_type="per_running_meter",
            name="Pinch Pleat",
        ),
        fabric=Fabric(pricing_method="per_running_meter", width_cm=140, price_per_meter=32.5, name="Linen"),
        options=(
            SelectedOption(
                option_id="lining",
                option_key="lining",
                value_id="blackout",
                value_label="Blackout lining",
                price=12,
                pricing_method="per_meter",
            ),
            SelectedOption(
                option_id="track",
                option_key="track",
                value_id="corded",
                value_label="Corded track",
                price=85,
                pricing_method="fixed",
            ),
        ),
    )
    return calculate(calc_input)


def roller_blind_example() -> CalculationResult:
    """Roller blind priced per square meter."""
    calc_input = CalculationInput(
        category="roller_blinds",
        measurements=Measurements(rail_width_mm=1000, drop_mm=1200),
        template=Template(
            header_hem_cm=8,
            bottom_hem_cm=10,
            side_hem_cm=4,
            waste_percentage=0,
            pricing_type="per_sqm",
            base_price=40,
        ),
        material=Material(pricing_method="per_sqm", price=55, name="Sunscreen 5%"),
    )
    return calculate(calc_input)


def worksheet_example() -> None:
    """Build contracts from a stored worksheet record."""
    worksheet = {
        "treatment_category": "roman_blinds",
        "measurements": {"rail_width": "1200", "drop": "1500"},
        "template": {
            "name": "Flat Roman",
            "header_allowance": 8,
            "bottom_hem": 10,
            "side_hems": 4,
            "seam_hems": 4,
            "waste_percent": 0,
            "pricing_type": "per_metre",
            "fullness_ratio": 1.0,
        },
        "fabric": {"fabric_width": 137, "pricing_method": "per_metre", "selling_price": 45},
    }

    build = ContractBuilder().build_input(worksheet)
    if not build.success:
        print(f"   Build failed: {build.error_msg}")
        return

    print_result("Roman blind from stored worksheet:", calculate(build.contract))


def main():
    """Main demo function."""
    configure_logging(level="INFO")

    print("🧵 Fabcalc Calculation Engine Demo")
    print("=" * 50)

    print("1. Curtains (linear treatment):")
    curtains = curtain_example()
    print_result(f"{curtains.widths_required} widths, {curtains.linear_meters}m of fabric", curtains)

    print("2. Roller blind (area treatment):")
    blind = roller_blind_example()
    print_result(f"{blind.sqm}m² of material", blind)

    print("3. Stored worksheet:")
    worksheet_example()

    print("4. Unsupported category:")
    try:
        calculate(CalculationInput(
            category="wallpaper",
            measurements=Measurements(rail_width_mm=3000, drop_mm=2400),
            template=Template(header_hem_cm=0, bottom_hem_cm=0, side_hem_cm=0,
                              waste_percentage=0, pricing_type="per_roll"),
        ))
    except FabricationError as e:
        print(f"   Rejected: {e}")
    print()

    print("5. Quote discount (10% off fabric items):")
    items = [
        {"id": "1", "name": "Linen curtains", "total": curtains.total},
        {"id": "2", "name": "Sunscreen roller blind", "total": blind.total},
        {"id": "3", "name": "Installation", "total": 120},
    ]
    subtotal = sum(item["total"] for item in items)
    discount = calculate_discount_amount(
        items, DiscountConfig(type="percentage", value=10, scope="fabrics_only"), subtotal
    )
    print(f"   Subtotal: {subtotal:.2f}  Discount: {discount:.2f}")
    print()

    print("6. Account keywords (trade-workroom also counts sheers):")
    items.append({"id": "4", "name": "Voile sheer panel", "total": 95})
    allocator = DiscountAllocator(ConfigLoader.create().build_config("trade-workroom"))
    discount = allocator.calculate(
        items, DiscountConfig(type="percentage", value=10, scope="fabrics_only"), subtotal + 95
    )
    print(f"   Discount: {discount:.2f}")
    print()

    print("✅ Demo completed successfully!")


if __name__ == "__main__":
    main()
