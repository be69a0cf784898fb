"""Logger setup utilities.

Provides two kinds of loggers, both writing JSONL with ISO 8601 timestamps:
- setup_jsonl_logger: file logger for persistent history records
- setup_debug_logging: stderr handler on the package logger for --debug
"""

from __future__ import annotations

__all__ = [
    "close_logger",
    "setup_debug_logging",
    "setup_jsonl_logger",
]

import logging
import sys
from pathlib import Path

from mcli.constants import APP_NAME
from mcli.utils.file_helpers import set_secure_permissions
from mcli.utils.logging.iso_formatter import ISO8601Formatter


def _ensure_secure_log_directory(log_file: Path) -> None:
    """Create log directory with secure permissions.

    Args:
        log_file: Path to the log file (parent directory will be created).

    Raises:
        OSError: If directory creation fails.
    """
    if log_file.parent.exists():
        return
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OSError(f"Failed to create log directory {log_file.parent}: {e}") from e
    set_secure_permissions(log_file.parent, is_directory=True)


def close_logger(logger: logging.Logger) -> None:
    """Close and detach every handler on logger."""
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def setup_jsonl_logger(
    logger_name: str,
    log_file: Path,
    log_level: int = logging.INFO,
) -> logging.Logger:
    """Set up a logger that appends JSONL with ISO 8601 timestamps to log_file.

    Creates the log directory if it doesn't exist (owner-only: 700).
    Any handlers left from a previous call are closed first, so calling this
    again with a different file re-targets the logger.

    Args:
        logger_name: Name for the logger (e.g., "mcli.hosts.history")
        log_file: Path to the log file
        log_level: Logging level (default: INFO)

    Returns:
        logging.Logger: Configured logger instance

    Raises:
        OSError: If the log directory or file cannot be created
    """
    _ensure_secure_log_directory(log_file)

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)
    logger.propagate = False  # History records stay out of debug output

    close_logger(logger)

    file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    file_handler.setLevel(log_level)
    file_handler.setFormatter(ISO8601Formatter())
    logger.addHandler(file_handler)

    return logger


def setup_debug_logging(enabled: bool) -> logging.Logger:
    """Configure the package logger for a CLI invocation.

    With enabled=True, records at DEBUG and above go to stderr as JSONL.
    Otherwise the package logger gets a NullHandler so nothing is printed
    (warnings included) unless --debug was given.

    Args:
        enabled: Whether --debug was passed.

    Returns:
        The "mcli" package logger.
    """
    logger = logging.getLogger(APP_NAME)
    close_logger(logger)
    logger.propagate = False

    if enabled:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ISO8601Formatter())
        logger.setLevel(logging.DEBUG)
    else:
        handler = logging.NullHandler()
        logger.setLevel(logging.WARNING)

    logger.addHandler(handler)
    return logger
