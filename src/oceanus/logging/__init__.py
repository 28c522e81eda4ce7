"""Logging-related tools."""

from oceanus.logging._levels import (
    CRITICAL,
    DEBUG,
    DETAIL,
    ERROR,
    INFO,
    WARNING,
)
from oceanus.logging.core import getLogger, setup_root_logger

__all__ = [
    "CRITICAL",
    "DEBUG",
    "DETAIL",
    "ERROR",
    "INFO",
    "WARNING",
    "getLogger",
    "setup_root_logger",
]
