"""Core of logging module."""

from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from oceanus.logging.environments import (
    in_batch_job,
    in_notebook,
    plain_logs_requested,
)
from oceanus.logging.formatters import Formatter, RichFormatter
from oceanus.logging.logger import DETAIL_LEVEL, Logger

VERBOSE_LEVELS = {
    0: logging.WARNING,
    1: logging.INFO,
    2: DETAIL_LEVEL,
    3: logging.DEBUG,
}


def setup_root_logger(verbose_level: int = 1) -> None:
    """Setup root logger.

    Args:
        verbose_level (int, optional): 0 (warnings only) to 3 (debug).
            Defaults to 1.
    """
    logging.setLoggerClass(Logger)
    logging.addLevelName(DETAIL_LEVEL, "DETAIL")
    level = VERBOSE_LEVELS.get(verbose_level, logging.INFO)
    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    plain = in_batch_job() or plain_logs_requested()
    handler = get_handler_no_rich() if plain else get_handler_rich()
    handler.setLevel(level)
    logger.addHandler(handler)

    if not in_notebook():
        for stream in (sys.stdout, sys.stderr):
            reconfigure = getattr(stream, "reconfigure", None)
            if reconfigure is not None:
                reconfigure(line_buffering=True)


def get_handler_rich() -> RichHandler:
    """Define Handler using rich.

    Returns:
        RichHandler: Handler.
    """
    theme = Theme(
        {
            "logging.level.detail": "cyan",
            "logging.level.info": "blue",
            "logging.level.debug": "dim",
            "logging.level.warning": "yellow",
            "logging.level.error": "red",
            "logging.level.critical": "bold red",
        }
    )
    handler = RichHandler(
        console=Console(theme=theme, force_jupyter=False),
        rich_tracebacks=False,
        show_time=True,
        show_path=False,
        markup=False,
        show_level=True,
        log_time_format="[%H:%M:%S]",
    )
    handler.setFormatter(RichFormatter())
    return handler


def get_handler_no_rich() -> logging.StreamHandler:
    """Define Handler for batch jobs, without colours.

    Returns:
        logging.StreamHandler: Handler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(Formatter())
    return handler


def getLogger(name: str | None = None) -> Logger:  # noqa: N802
    """Wrapper for logging.getLogger.

    Args:
        name (str | None, optional): Logger name. Defaults to None.

    Returns:
        Logger: Logger.
    """
    logging.setLoggerClass(Logger)
    return logging.getLogger(name)
