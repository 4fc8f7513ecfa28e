"""Configuration management for daypath."""

from daypath.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from daypath.core.config.models import AppConfig, LoggingConfig, MappingConfig

__all__ = [
    # Loaders
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    # Models
    "AppConfig",
    "LoggingConfig",
    "MappingConfig",
]
