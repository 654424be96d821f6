"""
Logging configuration and utilities for the fabrication calculation engine.
"""
from .config import configure_logging, get_audit_logger, get_logger

__all__ = ["configure_logging", "get_logger", "get_audit_logger"]
