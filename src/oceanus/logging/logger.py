"""Logger class."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

from typing_extensions import ParamSpec

from oceanus.logging._levels import DETAIL

if TYPE_CHECKING:
    from collections.abc import Generator

P = ParamSpec("P")

DETAIL_LEVEL = DETAIL
INDENT = "    "

_indent_level: ContextVar[int] = ContextVar("_indent_level", default=0)


class Logger(logging.Logger):
    """Logger with a DETAIL level and indented sections."""

    @property
    def indent(self) -> str:
        """Current indentation prefix."""
        return INDENT * _indent_level.get()

    def detail(self, msg: object, *args: P.args, **kwargs: P.kwargs) -> None:
        """Log 'msg % args' with severity 'DETAIL'.

        Args:
            msg (object): Message.
            *args (P.args): Arguments.
            **kwargs (P.kwargs): Keyword arguments.
        """
        if self.isEnabledFor(DETAIL_LEVEL):
            self._log(DETAIL_LEVEL, msg, args, **kwargs)

    def makeRecord(  # noqa: N802
        self,
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> logging.LogRecord:
        """Create the LogRecord, attaching the current indentation."""
        record = super().makeRecord(*args, **kwargs)
        record.indent = self.indent
        return record

    @contextmanager
    def timeit(
        self,
        message: str,
        level: int = logging.INFO,
    ) -> Generator[None, None, None]:
        """Log the execution time of the enclosed block.

        Args:
            message (str): Message to display.
            level (int, optional): Logging level. Defaults to INFO.

        Yields:
            Generator[None, None, None]: Context manager.
        """
        self.log(level, "%s...", message)
        start = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start
        self.log(level, "%s done in %.2fs", message, elapsed)

    @contextmanager
    def section(self, message: str) -> Generator[None, None, None]:
        """Create a section and indent all messages within.

        Args:
            message (str): First message of the section (unindented).

        Yields:
            Generator[None, None, None]: Context manager.
        """
        self.info(message)
        token = _indent_level.set(_indent_level.get() + 1)
        try:
            yield
        finally:
            _indent_level.reset(token)
