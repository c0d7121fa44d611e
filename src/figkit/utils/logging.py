"""Logging utilities built on top of :mod:`loguru`."""
from __future__ import annotations

import logging
import sys
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> | {extra[origin]} - {message}"


class LoguruHandler(logging.Handler):
    """Forward standard-library records to loguru, keeping the logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: object = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.bind(origin=record.name).opt(depth=6, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(level: str = "INFO") -> None:
    """Send figkit log records to a single loguru console sink."""

    logger.remove()
    logger.configure(extra={"origin": "figkit"})
    logger.add(lambda msg: print(msg, end="", file=sys.stderr), level=level, format=CONSOLE_FORMAT)
    logging.basicConfig(handlers=[LoguruHandler()], level=level, force=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a standard-library logger tied to loguru."""

    return logging.getLogger(name or "figkit")
