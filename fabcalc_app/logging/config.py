"""
Centralized logging configuration for the fabrication calculation engine.

This module provides standardized logging configuration using structlog
for all components. Calculations are pure and never depend on logging;
log records exist only so that callers can audit how a price was reached.

Request-scoped fields (quote id, account id) can be attached with
structlog.contextvars.bind_contextvars and appear on every record.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger, Processor


def _build_processors(
    format_json: bool,
    include_timestamp: bool,
    include_caller: bool,
    extra_processors: Optional[list],
) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ))

    processors.extend(extra_processors or [])

    # Renderer last
    if format_json:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return processors


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for the entire application.

    Safe to call more than once; the latest call wins.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON lines; otherwise human-readable
        include_timestamp: Include a UTC ISO timestamp in log output
        include_caller: Include module, function and line number
        extra_processors: Additional structlog processors, run before rendering
        stream: Output stream (stderr by default, so reports on stdout stay clean)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream or sys.stderr,
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=_build_processors(format_json, include_timestamp, include_caller, extra_processors),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structlog logger; configuration is resolved on first use."""
    return structlog.get_logger(name)


def get_audit_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for calculation audit records.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound with the calculation subsystem context
    """
    return get_logger(name).bind(subsystem="calculation", audit_trail=True)


def get_shadow_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for offline shadow comparisons.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound with the shadow subsystem context
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="shadow",
        audit_trail=False
    )


def log_calculation(
    logger: FilteringBoundLogger,
    category: str,
    kind: str,
    total: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a completed calculation with standardized format.

    Args:
        logger: Structlog logger instance
        category: Treatment category that was priced
        kind: Calculation kind (linear or area)
        total: Final total of the calculation
        context: Additional context data (usually the formula values)
    """
    bound_logger = logger.bind(
        category=category,
        calculation_kind=kind,
        total=total,
        event="calculation_completed"
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Calculation completed")


def log_shadow_comparison(
    logger: FilteringBoundLogger,
    record_id: str,
    category: str,
    old_total: float,
    new_total: float,
    diff_pct: float,
    matched: bool,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a shadow comparison between a recorded legacy total and this engine.

    Args:
        logger: Structlog logger instance
        record_id: Identifier of the recorded worksheet
        category: Treatment category of the record
        old_total: Total recorded by the legacy calculator
        new_total: Total produced by this engine
        diff_pct: Relative difference as a fraction of the old total
        matched: Whether the difference is within tolerance
        context: Additional context data
    """
    bound_logger = logger.bind(
        record_id=record_id,
        category=category,
        old_total=old_total,
        new_total=new_total,
        diff_pct=f"{diff_pct * 100:.2f}%",
        shadow_result="MATCH" if matched else "DIFF",
        event="shadow_comparison"
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if matched:
        bound_logger.debug("Shadow totals match")
    else:
        bound_logger.warning("Shadow totals differ")
