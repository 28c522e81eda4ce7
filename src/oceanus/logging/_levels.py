"""Logging levels."""

import logging

CRITICAL = logging.CRITICAL
ERROR = logging.ERROR
WARNING = logging.WARNING
INFO = logging.INFO
# Between INFO and DEBUG: model assembly steps and calibration timings.
DETAIL = 15
DEBUG = logging.DEBUG
