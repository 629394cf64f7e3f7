"""Configuration management for Starbar."""

from starbar.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_rating_config,
)
from starbar.core.config.models import AppConfig, ConfigBase, LoggingConfig

__all__ = [
    # Loaders
    "detect_format",
    "load_config",
    "load_app_config",
    "load_rating_config",
    "configure_logging",
    # Models
    "AppConfig",
    "ConfigBase",
    "LoggingConfig",
]
