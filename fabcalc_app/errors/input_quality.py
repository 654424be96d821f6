"""
Input contract error classifications.

These exceptions describe problems with the measurements, template, fabric
or material handed to the engine. They are raised before any arithmetic
runs and are never replaced by a default value.
"""

from typing import Any, Optional

from .base import FabricationError


class ValidationError(FabricationError):
    """A required numeric field is missing, non-numeric, or out of range."""

    MISSING_REQUIRED = "MISSING_REQUIRED"
    INVALID_TYPE = "INVALID_TYPE"
    OUT_OF_RANGE = "OUT_OF_RANGE"

    def __init__(self, message: str, field: Optional[str] = None,
                 code: Optional[str] = None,
                 details: Optional[dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.code = code
        self.details = details or {}


class ConfigurationError(FabricationError):
    """The template/fabric combination cannot support the requested calculation."""

    def __init__(self, message: str, contract: Optional[str] = None,
                 missing_fields: Optional[list[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.contract = contract
        self.missing_fields = missing_fields or []
