# -*- coding: utf-8 -*-
"""
Logging configuration.

One "nexa" logger tree: a rotating DEBUG file under Config.LOGS_DIR and a
console handler at Config.LOG_LEVEL. Submissions run on worker threads, so
every record carries its thread name.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

ROOT_LOGGER_NAME = "nexa"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(threadName)-12s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(threadName)s | %(message)s"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def setup_logger(console_level: Union[int, str, None] = None) -> logging.Logger:
    """
    Setup application logger with file and console handlers.

    Args:
        console_level: Overrides Config.LOG_LEVEL for the console handler
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # Calling setup twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=Config.DATETIME_FORMAT))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(_resolve_level(console_level or Config.LOG_LEVEL))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
