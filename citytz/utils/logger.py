"""Logging configuration."""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter
from citytz.config import settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _build_formatter() -> logging.Formatter:
    if settings.log_format == "json":
        return JsonFormatter(
            JSON_FORMAT,
            rename_fields={"levelname": "level", "name": "logger"},
            static_fields={"app": "citytz"},
        )
    return logging.Formatter(TEXT_FORMAT)


def setup_logger(name: str = __name__, level: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger writing JSON or plain text records.

    Output goes to stderr unless LOG_STREAM is "stdout", so command output on
    stdout stays machine readable.

    Args:
        name: Logger name, usually the module's __name__
        level: Level name overriding LOG_LEVEL
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or settings.log_level).upper()))

    if not logger.handlers:
        stream = sys.stdout if settings.log_stream == "stdout" else sys.stderr
        handler = logging.StreamHandler(stream)
        handler.setFormatter(_build_formatter())
        logger.addHandler(handler)

    return logger
