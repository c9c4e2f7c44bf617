"""Utility functions for inkshape.

This module provides utility functions including:

- Logging setup and configuration
- Recognition statistics tracking
"""

from inkshape.utils.logging import (
    RecognitionLogger,
    RecognitionStats,
    configure_logging,
)

__all__ = [
    "RecognitionLogger",
    "RecognitionStats",
    "configure_logging",
]
