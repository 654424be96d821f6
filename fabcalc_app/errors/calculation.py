"""
Calculation error classifications.

Raised for structurally impossible requests: a treatment category the
engine cannot price, or a pricing method that makes no sense for the
category being priced.
"""

from typing import Any, Optional

from .base import FabricationError


class CalculationError(FabricationError):
    """Structurally impossible calculation request."""

    UNSUPPORTED_CATEGORY = "unsupported_category"
    OPTION_PRICING = "option_pricing"
    UNKNOWN_PRICING_METHOD = "unknown_pricing_method"

    def __init__(self, message: str, code: Optional[str] = None,
                 details: Optional[dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.code = code
        self.details = details or {}
