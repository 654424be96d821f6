"""Discount configuration model."""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

DISCOUNT_TYPES = ("percentage", "fixed")
DISCOUNT_SCOPES = ("all", "fabrics_only", "selected_items")


@dataclass(frozen=True)
class DiscountConfig:
    """How a quote discount is applied. Any None field disables the discount."""
    type: Optional[str] = None           # 'percentage' or 'fixed'
    value: Optional[float] = None
    scope: Optional[str] = None          # 'all', 'fabrics_only' or 'selected_items'
    selected_items: Sequence[str] = ()

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "DiscountConfig":
        """Build a config from a stored quote record."""
        selected = record.get("selected_discount_items") or record.get("selectedItems") or ()
        return cls(
            type=record.get("discount_type"),
            value=record.get("discount_value"),
            scope=record.get("discount_scope"),
            selected_items=tuple(selected),
        )

    @property
    def is_complete(self) -> bool:
        """True when type, value and scope are all set."""
        return self.type is not None and self.value is not None and self.scope is not None
