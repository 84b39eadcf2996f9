"""
Logging configuration for uidump-parser.
Debug tracing goes to stdout; an optional log file receives everything.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

ROOT_LOGGER_NAME = "uidump_parser"
LOG_FILE_ENV = "UIDUMP_LOG_FILE"

# Module-level logger cache
_loggers: dict = {}
_handlers: List[logging.Handler] = []


class DumpLogFormatter(logging.Formatter):
    """Formatter with optional timestamp prefix."""

    def __init__(self, include_timestamp: bool = True):
        self.include_timestamp = include_timestamp
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname.ljust(8)

        if self.include_timestamp:
            timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
            prefix = f"[{timestamp}] [{level}] {record.name}: "
        else:
            prefix = f"[{level}] "

        message = record.getMessage()

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return prefix + message


def setup_logging(
    debug: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the package logger for one run.

    Handlers installed by a previous call are removed first, so the debug
    setting of each run is applied as given.

    Args:
        debug: Route DEBUG records to stdout when True
        log_file: Optional path for a full DEBUG log (falls back to $UIDUMP_LOG_FILE)

    Returns:
        The configured package logger
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)
    root_logger.propagate = False

    while _handlers:
        handler = _handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(DumpLogFormatter(include_timestamp=False))
    root_logger.addHandler(console_handler)
    _handlers.append(console_handler)

    if log_file is None:
        log_file = os.getenv(LOG_FILE_ENV) or None

    if log_file:
        log_path = Path(log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(DumpLogFormatter(include_timestamp=True))
            root_logger.addHandler(file_handler)
            _handlers.append(file_handler)
        except OSError as e:
            root_logger.warning(f"Could not create log file: {e}")

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger under the package hierarchy
    """
    if name not in _loggers:
        if name.startswith(ROOT_LOGGER_NAME):
            _loggers[name] = logging.getLogger(name)
        else:
            _loggers[name] = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    return _loggers[name]
