"""
Base error class for the fabrication calculation engine.
"""

from typing import Any, Optional


class FabricationError(Exception):
    """Base class for every error raised by the calculation engine."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False
