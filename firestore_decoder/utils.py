"""
Utility functions for the Firestore decoder.
Contains helpers for logging setup and internal assertions.
"""

import logging
import os
from typing import NoReturn

from .exceptions import InternalAssertionError

LOGGER_NAME = "firestore_decoder"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(log_level: str = "INFO", log_file: str = None) -> logging.Logger:
    """
    Set up logging configuration for the decoder.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path

    Returns:
        Configured logger
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(getattr(logging, log_level.upper()))

    # Remove existing handlers to avoid duplicates
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, log_level.upper()))
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger


def fail(message: str) -> NoReturn:
    """
    Report a broken internal invariant and abort the current call.

    Args:
        message: Description of the violated invariant.

    Raises:
        InternalAssertionError: Always.
    """
    full_message = f"INTERNAL ASSERTION FAILED: {message}"
    logger.error(full_message)
    raise InternalAssertionError(full_message)


def hard_assert(assertion: bool, message: str = "Unexpected state") -> None:
    """Call `fail` with `message` unless `assertion` holds."""
    if not assertion:
        fail(message)
