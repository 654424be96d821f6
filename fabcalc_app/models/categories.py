"""
Treatment category classification.

One closed classifier decides whether a treatment is priced by running
length of fabric (linear) or by area of material (area). Both the geometry
calculators and the options calculator go through it, so the two can never
disagree about a category.
"""

from enum import Enum
from typing import Optional


class TreatmentKind(str, Enum):
    """How a treatment category is measured and priced."""
    LINEAR = "linear"
    AREA = "area"
    UNSUPPORTED = "unsupported"


LINEAR_TYPES: frozenset[str] = frozenset({
    "curtains",
    "roman_blinds",
})

AREA_TYPES: frozenset[str] = frozenset({
    "roller_blinds",
    "venetian_blinds",
    "vertical_blinds",
    "cellular_blinds",
    "zebra_blinds",
    "panel_glide",
    "shutters",
    "plantation_shutters",
    "awning",
})


def normalize_category(category: Optional[str]) -> str:
    """Trim and lower-case a category identifier; None becomes ''."""
    if not category:
        return ""
    return category.strip().lower()


def classify(category: Optional[str]) -> TreatmentKind:
    """Map a treatment category identifier to its TreatmentKind."""
    normalized = normalize_category(category)

    if normalized in LINEAR_TYPES:
        return TreatmentKind.LINEAR
    if normalized in AREA_TYPES:
        return TreatmentKind.AREA
    return TreatmentKind.UNSUPPORTED


def is_linear_type(category: Optional[str]) -> bool:
    """True for categories priced by running length of fabric."""
    return classify(category) is TreatmentKind.LINEAR


def is_area_type(category: Optional[str]) -> bool:
    """True for categories priced by area of material."""
    return classify(category) is TreatmentKind.AREA


def is_unsupported_type(category: Optional[str]) -> bool:
    """True for categories the engine cannot price (wallpaper, unknown, empty)."""
    return classify(category) is TreatmentKind.UNSUPPORTED


def infer_category_from_name(name: Optional[str]) -> Optional[str]:
    """
    Infer a treatment category from a product or template name.

    Last resort for stored records that carry no category. Specific blind
    types are checked before the generic "blind" keyword.

    Args:
        name: Free-text product or template name

    Returns:
        Category identifier, or None when nothing matches
    """
    if not name:
        return None
    lower = name.lower()

    if "curtain" in lower:
        return "curtains"
    if "roman" in lower and "blind" in lower:
        return "roman_blinds"
    if "roller" in lower:
        return "roller_blinds"
    if "venetian" in lower:
        return "venetian_blinds"
    if "vertical" in lower:
        return "vertical_blinds"
    if "cellular" in lower or "honeycomb" in lower:
        return "cellular_blinds"
    if "zebra" in lower or ("day" in lower and "night" in lower):
        return "zebra_blinds"
    if "plantation" in lower and "shutter" in lower:
        return "plantation_shutters"
    if "shutter" in lower:
        return "shutters"
    if "panel" in lower and "glide" in lower:
        return "panel_glide"
    if "awning" in lower:
        return "awning"
    if "wallpaper" in lower:
        return "wallpaper"

    if "blind" in lower:
        return "roller_blinds"

    return None
