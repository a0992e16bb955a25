"""Configuration management for knotinsert.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- EditorConfig: Editing session settings (history, hit radius, new knots)
- GeometryConfig: Curve approximation settings
- RenderConfig: SVG export settings
- LoggingConfig: Logging settings
- KnotInsertSettings: Main application settings
"""

from knotinsert.config.settings import (
    EditorConfig,
    GeometryConfig,
    KnotInsertSettings,
    LoggingConfig,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "EditorConfig",
    "GeometryConfig",
    "KnotInsertSettings",
    "LoggingConfig",
    "RenderConfig",
    "get_default_settings",
]
