"""Logging configuration for Load Order Manager.

Provides centralized logging setup with file and console handlers, and the
verbosity switch applied whenever the debug logging setting changes.
"""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "load_order_manager"


def setup_logging(log_file: Path, debug: bool = False) -> logging.Logger:
    """Configure application-wide logging.

    Sets up logging to the given file and to the console (if debug mode).
    Any handlers from a previous call are closed and replaced.

    Args:
        log_file: File that receives the application log
        debug: If True, also log to console at DEBUG level

    Returns:
        The root logger for the application

    Raises:
        OSError: If the log file could not be opened
    """
    # Ensure the directory exists for the log file
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Create logger
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    # File handler - the logger level decides what reaches it
    file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # Console handler - only in debug mode
    if debug:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_formatter = logging.Formatter(
            "%(levelname)s - %(name)s - %(message)s"
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    return logger


def enable_debug_logging(enable: bool) -> None:
    """Switch the application's log verbosity.

    With debug logging enabled every message is recorded, otherwise only
    warnings and errors are.

    Args:
        enable: True to record everything, False for warnings and above
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if enable else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific module.

    Args:
        name: Module name (e.g., 'session_registry', 'game_detector')

    Returns:
        A logger instance for the module
    """
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
