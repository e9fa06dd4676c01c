"""
Logging Configuration
Attaches handlers to the package logger, using the level and log file from
`graphicalcalculator.config` unless the caller overrides them.
"""
from __future__ import annotations

import logging
import sys

from graphicalcalculator import config

PACKAGE_LOGGER = __package__ or "graphicalcalculator"

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def setup_logging(level: int | None = None, log_file: str | None = None) -> logging.Logger:
    """
    Configures the package logger and returns it.

    Args:
        level: Logging level. Defaults to GRAPHICALCALCULATOR_LOG_LEVEL (INFO if unset).
        log_file: Path to append logs to. Defaults to GRAPHICALCALCULATOR_LOG_FILE.
    """
    env_level, env_file = config.log_settings()
    level = env_level if level is None else level
    log_file = log_file or env_file

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Calling setup twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(
        "Logging to %s at %s",
        log_file or "stderr only", logging.getLevelName(level),
    )
    return logger
