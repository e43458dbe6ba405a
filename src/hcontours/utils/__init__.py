"""Utility functions for hcontours.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics
"""

from hcontours.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
