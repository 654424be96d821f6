"""
Quote discount allocation.

Works on plain quote item records as stored (dicts), so it accepts whatever
price fields a record happens to carry. Allocation never raises: an
incomplete or unrecognised discount is simply worth 0.
"""

import math
from typing import Any, Iterable, Mapping, Optional, Sequence

import structlog

from ..config.defaults import FABRIC_KEYWORDS, DefaultConfig, get_default_config
from ..models.discount import DiscountConfig

logger = structlog.get_logger(__name__)


def _to_float(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
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


def resolve_item_price(item: Mapping[str, Any]) -> float:
    """
    Resolve the line price of a quote item.

    Order: total, total_price, total_cost, unit_price x quantity, else 0.
    """
    for key in ("total", "total_price", "total_cost"):
        price = _to_float(item.get(key))
        if price is not None:
            return price

    unit_price = _to_float(item.get("unit_price"))
    if unit_price is not None:
        quantity = _to_float(item.get("quantity"))
        return unit_price * (quantity if quantity is not None else 1)

    return 0.0


def is_fabric_item(item: Mapping[str, Any], keywords: Sequence[str] = FABRIC_KEYWORDS) -> bool:
    """True when the item's name or description mentions a fabric keyword."""
    text = f"{item.get('name') or ''} {item.get('description') or ''}".lower()
    return any(keyword in text for keyword in keywords)


def calculate_discountable_amount(
    items: Iterable[Mapping[str, Any]],
    config: DiscountConfig,
    subtotal: float,
    fabric_keywords: Sequence[str] = FABRIC_KEYWORDS,
) -> float:
    """Amount the discount applies to, by scope; unknown scopes give 0."""
    if config.scope == "all":
        return subtotal

    if config.scope == "fabrics_only":
        return sum(resolve_item_price(item) for item in items if is_fabric_item(item, fabric_keywords))

    if config.scope == "selected_items":
        selected = set(config.selected_items)
        if not selected:
            return 0.0
        return sum(resolve_item_price(item) for item in items if item.get("id") in selected)

    return 0.0


def calculate_discount_amount(
    items: Optional[Iterable[Mapping[str, Any]]],
    config: Optional[DiscountConfig],
    subtotal: float,
    fabric_keywords: Sequence[str] = FABRIC_KEYWORDS,
) -> float:
    """
    Calculate the discount amount of a quote.

    Args:
        items: Quote item records
        config: Discount configuration; incomplete configs are worth 0
        subtotal: Quote subtotal used by the 'all' scope
        fabric_keywords: Keywords that mark an item as fabric

    Returns:
        Unrounded discount amount. A fixed discount is capped at the discountable
        amount, which is not floored at zero.
    """
    if config is None or not config.is_complete:
        return 0.0

    value = _to_float(config.value)
    if value is None:
        logger.debug("Discount value is not numeric", discount_value=config.value)
        return 0.0

    discountable = calculate_discountable_amount(
        [item for item in (items or ()) if isinstance(item, Mapping)],
        config,
        _to_float(subtotal) or 0.0,
        fabric_keywords,
    )

    if config.type == "percentage":
        return discountable * value / 100
    if config.type == "fixed":
        return min(value, discountable)

    logger.debug("Unknown discount type", discount_type=config.type)
    return 0.0


class DiscountAllocator:
    """
    Discount allocation bound to an account configuration.

    The fabrics_only scope matches items against the configured
    `discount.fabric_keywords` instead of the built-in set.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()

    @property
    def fabric_keywords(self) -> tuple[str, ...]:
        return self.config.discount.fabric_keywords

    def calculate(
        self,
        items: Optional[Iterable[Mapping[str, Any]]],
        discount: Optional[DiscountConfig],
        subtotal: float,
    ) -> float:
        """Discount amount of a quote under this configuration."""
        return calculate_discount_amount(items, discount, subtotal, self.fabric_keywords)
