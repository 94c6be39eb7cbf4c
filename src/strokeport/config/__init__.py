"""Configuration management for strokeport.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ExportConfig: Rendering settings (background, pattern, margin, print optimization)
- LoggingConfig: Logging settings
- StrokeportSettings: Main application settings
"""

from strokeport.config.settings import (
    ExportConfig,
    LoggingConfig,
    StrokeportSettings,
    get_default_settings,
)

__all__ = [
    "ExportConfig",
    "LoggingConfig",
    "StrokeportSettings",
    "get_default_settings",
]
