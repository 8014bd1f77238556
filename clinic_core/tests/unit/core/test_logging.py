"""
Unit tests for the logging utilities.
"""

import logging

from clinic_core.core.utils.logging import PIISanitizingFilter, get_logger


class TestPIISanitizingFilter:
    """Tests for masking contact data in log output."""

    def test_sanitize_masks_email_and_phone(self):
        text = "Contact ana@example.com or (11) 99999-9999"

        sanitized = PIISanitizingFilter.sanitize(text)

        assert sanitized == "Contact [REDACTED EMAIL] or [REDACTED PHONE]"

    def test_sanitize_leaves_ids_alone(self):
        text = "Created patient patient-1"
        assert PIISanitizingFilter.sanitize(text) == text

    def test_filter_bakes_args_into_message(self):
        """Test that formatted args are sanitized and cleared."""
        record = logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Updated %s",
            args=("bob@example.org",),
            exc_info=None,
        )

        assert PIISanitizingFilter().filter(record) is True
        assert record.getMessage() == "Updated [REDACTED EMAIL]"
        assert record.args == ()


class TestGetLogger:
    """Tests for get_logger."""

    def test_configures_handler_once(self):
        logger = get_logger("clinic_core.tests.logging_once")
        same_logger = get_logger("clinic_core.tests.logging_once")

        assert logger is same_logger
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_handler_has_pii_filter(self):
        logger = get_logger("clinic_core.tests.logging_filter")
        handler = logger.handlers[0]

        assert any(isinstance(f, PIISanitizingFilter) for f in handler.filters)
