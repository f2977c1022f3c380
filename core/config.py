"""
Configuration management for Image Transformation Studio.

The configuration is split into focused section classes that are combined
by Config and persisted to a TOML file.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import toml

from .exceptions import ConfigurationError


def _default_aspect_ratios() -> Dict[str, Dict[str, int]]:
    return {
        '1:1': {'width': 1000, 'height': 1000},
        '3:4': {'width': 1000, 'height': 1334},
        '9:16': {'width': 1000, 'height': 1778},
    }


@dataclass
class ImageConfig:
    """Configuration for image sizing."""

    # Used whenever an image or preset has no usable dimension
    default_dimension: int = 1000
    default_aspect_ratio: str = '1:1'
    aspect_ratios: Dict[str, Dict[str, int]] = field(default_factory=_default_aspect_ratios)

    def validate(self) -> List[str]:
        """Validate the image configuration and return any errors."""
        errors = []

        if self.default_dimension <= 0:
            errors.append("default_dimension must be positive")

        if self.default_aspect_ratio not in self.aspect_ratios:
            errors.append(f"default_aspect_ratio must be one of {sorted(self.aspect_ratios)}")

        for name, preset in self.aspect_ratios.items():
            for dimension in ('width', 'height'):
                if preset.get(dimension, 0) <= 0:
                    errors.append(f"aspect_ratios.{name}.{dimension} must be positive")

        return errors


@dataclass
class DownloadConfig:
    """Configuration for image downloads."""

    timeout_seconds: float = 30.0
    file_extension: str = 'png'

    def validate(self) -> List[str]:
        errors = []

        if self.timeout_seconds <= 0:
            errors.append("timeout_seconds must be positive")

        if not self.file_extension:
            errors.append("file_extension cannot be empty")

        return errors


@dataclass
class DebounceConfig:
    """Configuration for debounced URL updates."""

    delay_seconds: float = 0.3

    def validate(self) -> List[str]:
        errors = []
        if self.delay_seconds < 0:
            errors.append("delay_seconds cannot be negative")
        return errors


@dataclass
class LoggingConfig:
    """Configuration for application logging."""

    level: str = 'INFO'
    log_file: Optional[str] = None
    log_dir: str = 'logs'
    format_string: Optional[str] = None

    def validate(self) -> List[str]:
        errors = []
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.level.upper() not in valid_levels:
            errors.append(f"level must be one of {valid_levels}")
        return errors


@dataclass
class Config:
    """Main configuration class that combines all configuration sections."""

    config_file_path: str = "config.toml"

    images: ImageConfig = field(default_factory=ImageConfig)
    download: DownloadConfig = field(default_factory=DownloadConfig)
    debounce: DebounceConfig = field(default_factory=DebounceConfig)
    log_settings: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Load configuration when an instance is created."""
        self.load_config()

    def to_dict(self) -> Dict[str, Dict]:
        """Return the TOML-serializable form of the configuration."""
        logging_section = {
            'level': self.log_settings.level,
            'log_dir': self.log_settings.log_dir,
        }
        # TOML has no null; unset optional values are left out
        if self.log_settings.log_file:
            logging_section['log_file'] = self.log_settings.log_file
        if self.log_settings.format_string:
            logging_section['format_string'] = self.log_settings.format_string

        return {
            'images': {
                'default_dimension': self.images.default_dimension,
                'default_aspect_ratio': self.images.default_aspect_ratio,
                'aspect_ratios': self.images.aspect_ratios,
            },
            'download': {
                'timeout_seconds': self.download.timeout_seconds,
                'file_extension': self.download.file_extension,
            },
            'debounce': {
                'delay_seconds': self.debounce.delay_seconds,
            },
            'logging': logging_section,
        }

    def save_config(self) -> None:
        """Save current configuration to TOML file."""
        try:
            with open(self.config_file_path, 'w') as f:
                toml.dump(self.to_dict(), f)
            logging.info(f"Configuration saved to {self.config_file_path}")
        except OSError as e:
            error_msg = f"Error saving configuration: {e}"
            logging.error(error_msg)
            raise ConfigurationError(error_msg, config_file=self.config_file_path)

    def load_config(self) -> None:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file_path) as f:
                config_data = toml.load(f)
        except FileNotFoundError:
            logging.info(f"{self.config_file_path} not found. Creating with default values.")
            self.save_config()
            return
        except toml.TomlDecodeError as e:
            error_msg = f"Error decoding {self.config_file_path}: {e}"
            logging.error(error_msg)
            raise ConfigurationError(error_msg, config_file=self.config_file_path)
        except OSError as e:
            error_msg = f"Error loading configuration: {e}"
            logging.error(error_msg)
            raise ConfigurationError(error_msg, config_file=self.config_file_path)

        if 'images' in config_data:
            images_config = config_data['images']
            self.images.default_dimension = images_config.get('default_dimension', self.images.default_dimension)
            self.images.default_aspect_ratio = images_config.get('default_aspect_ratio', self.images.default_aspect_ratio)
            if 'aspect_ratios' in images_config:
                self.images.aspect_ratios = {
                    name: dict(preset) for name, preset in images_config['aspect_ratios'].items()
                }

        if 'download' in config_data:
            download_config = config_data['download']
            self.download.timeout_seconds = download_config.get('timeout_seconds', self.download.timeout_seconds)
            self.download.file_extension = download_config.get('file_extension', self.download.file_extension)

        if 'debounce' in config_data:
            self.debounce.delay_seconds = config_data['debounce'].get('delay_seconds', self.debounce.delay_seconds)

        if 'logging' in config_data:
            logging_config = config_data['logging']
            self.log_settings.level = logging_config.get('level', self.log_settings.level)
            self.log_settings.log_file = logging_config.get('log_file', self.log_settings.log_file)
            self.log_settings.log_dir = logging_config.get('log_dir', self.log_settings.log_dir)
            self.log_settings.format_string = logging_config.get('format_string', self.log_settings.format_string)

        logging.info(f"Configuration loaded from {self.config_file_path}")

    def validate(self) -> List[str]:
        """Validate all configuration sections and return any errors."""
        errors = []
        errors.extend(self.images.validate())
        errors.extend(self.download.validate())
        errors.extend(self.debounce.validate())
        errors.extend(self.log_settings.validate())
        return errors
