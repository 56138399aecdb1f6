"""Utility helpers for logging and secret masking."""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import colorlog


# 北京时区 UTC+8
BEIJING_TZ = timezone(timedelta(hours=8))

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _beijing_time(record: logging.LogRecord, datefmt: str | None) -> str:
    dt = datetime.fromtimestamp(record.created, tz=timezone.utc).astimezone(BEIJING_TZ)
    s = dt.strftime(datefmt or DATE_FORMAT)
    # 2025-10-24 10:10:24,047
    return f"{s},{int(record.msecs):03d}"


class BeijingTimeFormatter(logging.Formatter):
    """Formatter that uses Beijing time (UTC+8) instead of local time."""

    def formatTime(self, record, datefmt=None):
        return _beijing_time(record, datefmt)


class BeijingColoredFormatter(colorlog.ColoredFormatter):
    """Colored formatter with Beijing time."""

    def formatTime(self, record, datefmt=None):
        return _beijing_time(record, datefmt)


def setup_logger(name: str, level: str | None = None) -> logging.Logger:
    """Configure a color logger on stderr, optionally mirrored to ``LOG_FILE``.

    Standard output is reserved for the rendered HTML, so every handler
    writes to stderr or to a file.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "WARNING")

    logger = logging.getLogger(name)
    level_value = getattr(logging, level.upper(), None)
    if not isinstance(level_value, int):
        level_value = logging.WARNING
    logger.setLevel(level_value)

    if logger.handlers:
        return logger

    color_formatter = BeijingColoredFormatter(
        "%(log_color)s" + LOG_FORMAT,
        datefmt=DATE_FORMAT,
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
    )
    console_handler = colorlog.StreamHandler(stream=sys.stderr)
    console_handler.setFormatter(color_formatter)
    logger.addHandler(console_handler)

    log_file = os.getenv("LOG_FILE", "").strip()
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(BeijingTimeFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def mask_secret(value: str, visible: int = 4) -> str:
    """Return *value* with everything but the first *visible* characters hidden."""
    if not value:
        return ""
    if len(value) <= visible:
        return "*" * len(value)
    return value[:visible] + "*" * (len(value) - visible)
