"""Tests for logging configuration and standardized log records."""

from unittest.mock import Mock

import structlog

from fabcalc_app.logging import configure_logging, get_audit_logger, get_logger
from fabcalc_app.logging.config import get_shadow_logger, log_calculation, log_shadow_comparison


class TestLoggerFactories:
    """Test logger creation."""

    def setup_method(self):
        configure_logging(level="DEBUG", format_json=True)

    def teardown_method(self):
        structlog.reset_defaults()

    def test_get_logger(self):
        logger = get_logger(__name__)
        assert hasattr(logger, "info")

    def test_audit_logger_context(self):
        logger = get_audit_logger(__name__)
        context = structlog.get_context(logger)

        assert context["subsystem"] == "calculation"
        assert context["audit_trail"] is True

    def test_shadow_logger_context(self):
        context = structlog.get_context(get_shadow_logger(__name__))
        assert context["subsystem"] == "shadow"


class TestLogCalculation:
    """Test the calculation audit record."""

    def test_fields(self):
        logger = Mock()
        log_calculation(logger, "curtains", "linear", 208.8)

        logger.bind.assert_called_once_with(
            category="curtains",
            calculation_kind="linear",
            total=208.8,
            event="calculation_completed",
        )
        logger.bind.return_value.debug.assert_called_once_with("Calculation completed")

    def test_context(self):
        logger = Mock()
        log_calculation(logger, "curtains", "linear", 208.8, context={"widths_required": 4})

        bound = logger.bind.return_value
        bound.bind.assert_called_once_with(context={"widths_required": 4})
        bound.bind.return_value.debug.assert_called_once()


class TestLogShadowComparison:
    """Test the shadow comparison record."""

    def test_match_logged_at_debug(self):
        logger = Mock()
        log_shadow_comparison(logger, "ws-1", "curtains", 210.0, 208.8, 0.0057, True)

        kwargs = logger.bind.call_args.kwargs
        assert kwargs["shadow_result"] == "MATCH"
        assert kwargs["diff_pct"] == "0.57%"
        logger.bind.return_value.debug.assert_called_once_with("Shadow totals match")
        logger.bind.return_value.warning.assert_not_called()

    def test_diff_logged_at_warning(self):
        logger = Mock()
        log_shadow_comparison(logger, "ws-1", "curtains", 300.0, 208.8, 0.304, False)

        assert logger.bind.call_args.kwargs["shadow_result"] == "DIFF"
        logger.bind.return_value.warning.assert_called_once_with("Shadow totals differ")
