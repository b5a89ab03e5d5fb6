"""Logging setup for applications embedding the scoring engine."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

ROOT_LOGGER = 'pokerleague'

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(levelname)s: %(message)s'


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Route the engine's records to a log file and/or stdout.

    The scoring modules log debug records only (strategy registrations,
    calculations, scoreboard rebuilds). Calling this again replaces the
    handlers from the previous call.

    Args:
        log_dir: Directory for pokerleague_<timestamp>.log (default: ./logs)
        level: Threshold for the logger and its handlers
        log_to_file: Whether to write a log file
        log_to_console: Whether to echo to stdout

    Returns:
        The 'pokerleague' logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    if log_to_file:
        log_dir = Path(log_dir or 'logs')
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f'{ROOT_LOGGER}_{datetime.now():%Y%m%d_%H%M%S}.log'
        logger.addHandler(_handler(logging.FileHandler(log_file), level, FILE_FORMAT))

    if log_to_console:
        logger.addHandler(_handler(logging.StreamHandler(sys.stdout), level, CONSOLE_FORMAT))

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    return logging.getLogger(name)
