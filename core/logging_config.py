"""
Logging configuration for Image Transformation Studio.

This module provides centralized logging configuration with proper
formatting, log levels, and file output options.
"""

import logging
import os
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Set up logging configuration for the application.

    Args:
        level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        log_file: Name of log file (optional)
        log_dir: Directory for log files (defaults to 'logs')
        format_string: Custom format string (optional)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = _ensure_log_path(log_file, log_dir or 'logs')

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        logging.info(f"Logging to file: {log_path}")

    logging.info(f"Logging configured with level: {level}")


def setup_logging_from_config(logging_config) -> None:
    """Apply a LoggingConfig section (see core.config)."""
    setup_logging(
        level=logging_config.level,
        log_file=logging_config.log_file,
        log_dir=logging_config.log_dir,
        format_string=logging_config.format_string,
    )


def _ensure_log_path(log_file: str, log_dir: str) -> str:
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    return os.path.join(log_dir, log_file)
