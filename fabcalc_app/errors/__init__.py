"""
Error classification for the fabrication calculation engine.

All errors derive from FabricationError and propagate synchronously to the
caller. The engine never retries or substitutes a default to recover.
"""

from .base import FabricationError
from .calculation import CalculationError
from .input_quality import ConfigurationError, ValidationError

__all__ = [
    "FabricationError",
    # Input contract errors
    "ValidationError",
    "ConfigurationError",
    # Calculation errors
    "CalculationError",
]
