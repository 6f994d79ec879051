"""
Logging configuration for the process logger.

Every module calls setup_logger(__name__). Terminal output stays terse;
an optional log file gets timestamps and logger names. Verbosity can be
overridden with the PROCLOG_LOG_LEVEL environment variable.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

LOG_LEVEL_ENV = "PROCLOG_LOG_LEVEL"
DEFAULT_LEVEL = logging.INFO

CONSOLE_FORMAT = '[%(levelname)s] %(message)s'
FILE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s - %(message)s'
FILE_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def resolve_level(level: Optional[Union[int, str]] = None) -> int:
    """
    Resolve a logging level from an explicit value or the environment.

    Args:
        level: Explicit level (int or name such as "debug"). When None,
               PROCLOG_LOG_LEVEL is consulted.

    Returns:
        Numeric logging level, INFO if the value is not recognised
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV)
    if level is None or level == "":
        return DEFAULT_LEVEL
    if isinstance(level, int):
        return level

    value = logging.getLevelName(str(level).strip().upper())
    # getLevelName returns "Level X" for unknown names
    return value if isinstance(value, int) else DEFAULT_LEVEL


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT))
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    # The file always records DEBUG, whatever the terminal shows
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logger(
    name: str,
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Return the named logger with the process logger's handlers attached.

    Calling it again for the same name replaces the handlers instead of
    stacking duplicates.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: PROCLOG_LOG_LEVEL or INFO)
        log_file: Optional file that also receives the records

    Returns:
        Configured logger instance
    """
    level = resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.addHandler(_console_handler(level))
    if log_file:
        logger.addHandler(_file_handler(log_file))

    logger.propagate = False
    return logger
