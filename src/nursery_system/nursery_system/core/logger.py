from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "nursery_system"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a stdout handler to the package logger (idempotent)."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger under the package logger.

    Accepts module names such as ``src.nursery_system.nursery_system.access.store``
    and keeps only the part from ``nursery_system`` on.
    """
    marker = ROOT_LOGGER_NAME + "."
    idx = name.rfind(marker)
    if idx >= 0:
        name = name[idx:]
    elif not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
