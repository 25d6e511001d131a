"""Configuration management for corefont.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SourceConfig: AFM file discovery and decoding
- ParserConfig: AFM parsing settings
- OutputConfig: Generated artifact settings
- LoggingConfig: Logging settings
- CoreFontSettings: Main application settings
"""

from corefont.config.settings import (
    CoreFontSettings,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    ParserConfig,
    SourceConfig,
    get_default_settings,
)

__all__ = [
    "CoreFontSettings",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "ParserConfig",
    "SourceConfig",
    "get_default_settings",
]
