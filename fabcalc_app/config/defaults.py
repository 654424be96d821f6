"""Default configuration parameters for the fabrication calculation engine."""

from dataclasses import dataclass

FABRIC_KEYWORDS = (
    "fabric",
    "material",
    "textile",
    "curtain",
    "drape",
    "blind",
    "roman",
    "roller",
)


@dataclass(frozen=True)
class RoundingParams:
    """Rounding applied to reported figures."""
    decimals: int = 2                   # Money and meterage decimals


@dataclass(frozen=True)
class DiscountParams:
    """Discount allocation parameters."""
    fabric_keywords: tuple[str, ...] = FABRIC_KEYWORDS   # fabrics_only scope match set


@dataclass(frozen=True)
class GridParams:
    """Pricing grid parameters."""
    mm_threshold: float = 500.0         # Grid dimensions >= this are taken as mm


@dataclass(frozen=True)
class ShadowParams:
    """Offline shadow comparison parameters."""
    tolerance_pct: float = 0.01                                # Max relative diff counted as a match
    categories: tuple[str, ...] = ("curtains", "roman_blinds")  # Categories compared


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    rounding: RoundingParams
    discount: DiscountParams
    grid: GridParams
    shadow: ShadowParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        rounding=RoundingParams(),
        discount=DiscountParams(),
        grid=GridParams(),
        shadow=ShadowParams(),
    )
