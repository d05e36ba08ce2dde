"""
Logging Configuration
Sets up the package logger for panel_chrome.
"""

import logging
import sys
from typing import Optional, Union


def setup_logging(
    level: Union[int, str] = logging.INFO, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configures the logger for the 'panel_chrome' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("panel_chrome")
    logger.setLevel(level)

    # Re-running setup must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


__all__ = ["setup_logging"]
