"""Configuration management for glyphlayout.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TypoFlags: Kerning/ligature typography flags
- ShapingConfig: Script, language and shaping buffer settings
- LoggingConfig: Logging settings
- LayoutSettings: Main application settings
"""

from glyphlayout.config.settings import (
    LayoutSettings,
    LoggingConfig,
    ShapingConfig,
    TypoFlags,
    get_default_settings,
)

__all__ = [
    "LayoutSettings",
    "LoggingConfig",
    "ShapingConfig",
    "TypoFlags",
    "get_default_settings",
]
