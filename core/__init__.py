"""
Core infrastructure module for Image Transformation Studio.

This module provides the foundational components including configuration management,
logging setup, and custom exceptions.
"""

from .config import Config, DebounceConfig, DownloadConfig, ImageConfig, LoggingConfig
from .exceptions import (
    ConfigurationError,
    DatabaseConnectionError,
    DownloadError,
    TransformStudioError,
    UserNotFoundError,
    ValidationError,
)
from .logging_config import setup_logging

__all__ = [
    # Configuration
    'Config',
    'ImageConfig',
    'DownloadConfig',
    'DebounceConfig',
    'LoggingConfig',

    # Exceptions
    'TransformStudioError',
    'ConfigurationError',
    'ValidationError',
    'DownloadError',
    'DatabaseConnectionError',
    'UserNotFoundError',

    # Logging
    'setup_logging',
]

# Version info
__version__ = "1.0.0"
