"""Configuration management for inkshape.

This module provides configuration management using Pydantic models.
Every tolerance used by the recognizer, rasterizer and outline generator
lives here with its default value.

Key classes:
- RecognizerConfig: Detector thresholds, one nested model per shape kind
- RasterConfig: Pixel-grid rasterization settings
- OutlineConfig: Vector outline sampling settings
- LoggingConfig: Logging settings
- InkshapeSettings: Main application settings
"""

from inkshape.config.settings import (
    ArcDetectionConfig,
    CircleDetectionConfig,
    InkshapeSettings,
    LineDetectionConfig,
    LoggingConfig,
    OutlineConfig,
    RasterConfig,
    RecognizerConfig,
    RectangleDetectionConfig,
    TriangleDetectionConfig,
    get_default_settings,
)

__all__ = [
    "ArcDetectionConfig",
    "CircleDetectionConfig",
    "InkshapeSettings",
    "LineDetectionConfig",
    "LoggingConfig",
    "OutlineConfig",
    "RasterConfig",
    "RecognizerConfig",
    "RectangleDetectionConfig",
    "TriangleDetectionConfig",
    "get_default_settings",
]
