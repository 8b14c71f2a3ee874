"""Logging configuration helpers."""

import logging

from nutrient_analysis.config import parse_log_level

PACKAGE_LOGGER = "nutrient_analysis"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: int | str | None = logging.INFO) -> logging.Logger:
    """Attach one stderr handler to the package logger and apply the level.

    Level names are resolved like the LOG_LEVEL setting. Repeated calls only
    update the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    resolved = level if isinstance(level, int) else parse_log_level(level)
    logger.setLevel(resolved)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
