"""Custom formatters."""

import logging
from typing import ClassVar

from oceanus.logging._levels import (
    CRITICAL,
    DEBUG,
    DETAIL,
    ERROR,
    INFO,
    WARNING,
)


class Formatter(logging.Formatter):
    """Plain formatter: '[hh:mm:ss] [LEVEL   ] message'."""

    level_names: ClassVar[dict[int, str]] = {
        CRITICAL: "CRITICAL",
        ERROR: "ERROR",
        WARNING: "WARNING",
        INFO: "INFO",
        DETAIL: "DETAIL",
        DEBUG: "DEBUG",
    }
    width = 8

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record as text.

        Multi-line messages are aligned on the first line.

        Args:
            record (logging.LogRecord): Record.

        Returns:
            str: Text.
        """
        timestamp = self.formatTime(record, "%H:%M:%S")
        name = self.level_names.get(record.levelno, "LOG")
        prefix = f"[{timestamp}] [{name:<{self.width}}] "
        indent = getattr(record, "indent", "")
        lines = record.getMessage().split("\n")
        continuation = " " * len(prefix) + indent
        rest = [continuation + p for p in lines[1:]]
        return "\n".join([prefix + indent + lines[0], *rest])


class RichFormatter(logging.Formatter):
    """Formatter for rich handlers, which render time and level."""

    def format(self, record: logging.LogRecord) -> str:
        """Prefix every line of the message with the record indentation.

        Args:
            record (logging.LogRecord): Record.

        Returns:
            str: Text.
        """
        indent = getattr(record, "indent", "")
        return "\n".join(indent + p for p in record.getMessage().split("\n"))
