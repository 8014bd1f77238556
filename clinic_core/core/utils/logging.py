"""
Logging Utility Module.

This module provides logging configuration for the package, with a filter
that keeps patient contact data (e-mail addresses, phone numbers) out of
log output.
"""

import logging
import re
import sys

from clinic_core.core.config.settings import get_settings
from clinic_core.core.constants import LOG_DATE_FORMAT, LOG_FORMAT

_EMAIL_PATTERN = re.compile(r"[^\s@'\"]+@[^\s@'\"]+\.[^\s@'\"]+")
_PHONE_PATTERN = re.compile(r"\(?\b\d{2}\)?[\s.-]?\d{4,5}[\s.-]?\d{4}\b")


class PIISanitizingFilter(logging.Filter):
    """Custom logging filter to mask e-mail addresses and phone numbers."""

    def __init__(self, name: str = "PIISanitizer"):
        super().__init__(name)

    @staticmethod
    def sanitize(text: str) -> str:
        """Return *text* with contact data replaced by placeholders."""
        text = _EMAIL_PATTERN.sub("[REDACTED EMAIL]", text)
        return _PHONE_PATTERN.sub("[REDACTED PHONE]", text)

    def filter(self, record: logging.LogRecord) -> bool:
        """Sanitize the fully formatted log message."""
        original_message = record.getMessage()
        sanitized_message = self.sanitize(original_message)

        # Args are baked into msg so formatters do not re-apply them
        record.msg = sanitized_message
        record.args = ()

        return True


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance for the specified name.

    The logger writes to stdout with the package format and the PII filter
    attached. It is only configured once per name.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        log_level = getattr(logging, get_settings().LOG_LEVEL, logging.INFO)
        logger.setLevel(log_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        console_handler.addFilter(PIISanitizingFilter())

        logger.addHandler(console_handler)

        # Prevent propagation to root logger to avoid duplicate logs
        logger.propagate = False

    return logger
