"""Configuration management for glyphbridge.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- BridgeConfig: Corner detection and bridge matching settings
- ProcessingConfig: Font processing settings
- LoggingConfig: Logging settings
- GlyphBridgeSettings: Main application settings
"""

from glyphbridge.config.settings import (
    BridgeConfig,
    GlyphBridgeSettings,
    LoggingConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "BridgeConfig",
    "GlyphBridgeSettings",
    "LoggingConfig",
    "ProcessingConfig",
    "get_default_settings",
]
