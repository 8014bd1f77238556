"""
Core Constants Package

This package contains constants used throughout the application core.
"""

from clinic_core.core.constants.logging import LOG_DATE_FORMAT, LOG_FORMAT, LogLevel

__all__ = [
    "LOG_DATE_FORMAT",
    "LOG_FORMAT",
    "LogLevel",
]
