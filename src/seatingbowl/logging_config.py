"""
Logging Configuration
=====================
The solver modules only create child loggers of the "seatingbowl"
namespace (`logging.getLogger(__name__)`). Nothing is emitted until an
application, such as `python -m seatingbowl`, calls `setup_logging`.

Levels used by the package:
    DEBUG: one line per riser solve and per built tier.
    INFO: one line per built section.
    WARNING: aisle steps that start in front of their tread.
"""
import logging
import sys
from typing import List, Optional, TextIO

PACKAGE_LOGGER = "seatingbowl"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Route the package log records to the console and, optionally, a file.

    Calling it again replaces the handlers of the previous call.

    Args:
        level: Threshold for the package logger and all its handlers.
        log_file: Path of a log file, truncated on every call.
        stream: Console stream, stdout by default.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.debug(f"Logging to {len(handlers)} handler(s) at level {logging.getLevelName(level)}.")
    return package_logger
