"""
Logging Constants Module

This module defines constants related to logging so that log levels and
formats stay consistent across the package.
"""

from enum import Enum

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(str, Enum):
    """
    Standard log levels for application logging.

    These levels align with standard Python logging levels
    but are provided as an enum for type safety and consistency.
    """

    CRITICAL = "CRITICAL"  # Critical errors requiring immediate attention
    ERROR = "ERROR"  # Error conditions
    WARNING = "WARNING"  # Warning conditions
    INFO = "INFO"  # Informational messages
    DEBUG = "DEBUG"  # Debug-level messages
