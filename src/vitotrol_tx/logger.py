#!/usr/bin/env python3
"""Vitotrol - console logging, with colour.

Records below WARNING go to stdout, the others to stderr.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime as dt

import colorlog

from .version import VERSION


CONSOLE_FMT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

LOG_COLOURS = {
    "DEBUG": "white",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "bold_red",
    "CRITICAL": "bold_red",
}  # default_log_colors


class _Formatter:  # format asctime with configurable precision
    """Formatter instances convert a LogRecord to text."""

    default_time_format = "%Y-%m-%dT%H:%M:%S.%f"
    precision = 3

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Return the creation time (asctime) of the LogRecord as formatted text.

        Allows for sub-second precision, using datetime instead of time objects.
        """
        result = dt.fromtimestamp(record.created).strftime(
            datefmt or self.default_time_format
        )
        if "f" not in (datefmt or self.default_time_format):
            return result
        precision = self.precision or -1
        return result[: precision - 6] if -1 <= precision < 6 else result


class ColoredFormatter(_Formatter, colorlog.ColoredFormatter):  # type: ignore[misc]
    pass


class StdErrFilter(logging.Filter):  # record.levelno >= logging.WARNING
    """For sys.stderr, process only warnings and worse."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return True if the record is to be processed."""  # WARNING-30, ERROR-40
        return record.levelno >= logging.WARNING


class StdOutFilter(logging.Filter):  # record.levelno < logging.WARNING
    """For sys.stdout, process only info and debug."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return True if the record is to be processed."""  # INFO-20, DEBUG-10
        return record.levelno < logging.WARNING


def set_logging(logger: logging.Logger, level: int = logging.WARNING) -> None:
    """Create/configure the console handlers of a logger.

    May be called several times (e.g. to change the level) without duplicating them.
    """

    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_fmt = ColoredFormatter(
        fmt=f"%(log_color)s{CONSOLE_FMT}",
        reset=True,
        log_colors=LOG_COLOURS,
    )

    handler: logging.Handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(console_fmt)
    handler.setLevel(logging.WARNING)
    handler.addFilter(StdErrFilter())  # record.levelno >= .WARNING
    logger.addHandler(handler)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(console_fmt)
    handler.setLevel(logging.DEBUG)
    handler.addFilter(StdOutFilter())  # record.levelno < .WARNING
    logger.addHandler(handler)

    logger.debug("vitotrol %s", VERSION)
