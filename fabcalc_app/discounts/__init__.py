"""Quote discount allocation"""

from .allocator import (
    DiscountAllocator,
    calculate_discount_amount,
    calculate_discountable_amount,
    is_fabric_item,
    resolve_item_price,
)

__all__ = [
    "DiscountAllocator",
    "calculate_discount_amount",
    "calculate_discountable_amount",
    "is_fabric_item",
    "resolve_item_price",
]
