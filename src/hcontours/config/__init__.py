"""Configuration management for hcontours.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TraceConfig: Contour simplification tolerances
- ThresholdConfig: Luminance levels to trace
- PageConfig: Paper size, margins and line widths
- RenderConfig: Clipping, background and colour options
- LoggingConfig: Logging settings
- HContoursSettings: Main application settings
"""

from hcontours.config.settings import (
    PAPER_SIZES,
    HContoursSettings,
    LoggingConfig,
    PageConfig,
    PaperSize,
    RenderConfig,
    ThresholdConfig,
    TraceConfig,
    even_thresholds,
    get_default_settings,
    mm_or_inch,
    parse_paper_size,
)

__all__ = [
    "PAPER_SIZES",
    "HContoursSettings",
    "LoggingConfig",
    "PageConfig",
    "PaperSize",
    "RenderConfig",
    "ThresholdConfig",
    "TraceConfig",
    "even_thresholds",
    "get_default_settings",
    "mm_or_inch",
    "parse_paper_size",
]
