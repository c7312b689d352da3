"""Configuration management for bidiwrap.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FormatterConfig: Context direction, stereo reset and default heuristic
- OutputConfig: Rendering settings (HTML, isolation, control display)
- LoggingConfig: Logging settings
- BidiWrapSettings: Main application settings
"""

from bidiwrap.config.settings import (
    BidiWrapSettings,
    FormatterConfig,
    HeuristicName,
    LogLevel,
    LoggingConfig,
    OutputConfig,
    get_default_settings,
)

__all__ = [
    "BidiWrapSettings",
    "FormatterConfig",
    "HeuristicName",
    "LogLevel",
    "LoggingConfig",
    "OutputConfig",
    "get_default_settings",
]
