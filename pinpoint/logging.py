"""
Centralized logging configuration for Pinpoint.

Usage:
    from pinpoint.logging import setup_logging, get_logger

    # In __main__.py (once at startup)
    setup_logging(level='DEBUG', log_file='/tmp/pinpoint_debug.log')

    # In any module
    logger = get_logger(__name__)
    logger.debug("Some debug message")
"""

import logging
import sys
from typing import Optional

# Default log file path, also tailed by the log collector
DEFAULT_LOG_FILE = '/tmp/pinpoint_debug.log'

_logging_configured = False


def setup_logging(
    level: str = 'WARNING',
    log_file: Optional[str] = None,
    console: bool = False
) -> None:
    """
    Configure logging for Pinpoint.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        log_file: Path to log file (only used if level is DEBUG or INFO)
        console: If True, also log to console (stderr)
    """
    global _logging_configured

    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger('pinpoint')
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # File output only makes sense for the chatty levels
    if numeric_level <= logging.INFO and log_file:
        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    _logging_configured = True

    logger.debug(f"Logging configured: level={level}, log_file={log_file}, console={console}")


def is_configured() -> bool:
    """True once setup_logging() has run in this process."""
    return _logging_configured


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module, parented under the 'pinpoint' logger.

    Args:
        name: Module name (typically __name__)
    """
    if name.startswith('pinpoint'):
        return logging.getLogger(name)
    return logging.getLogger(f'pinpoint.{name}')
