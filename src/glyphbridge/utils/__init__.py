"""Utility functions for glyphbridge.

This module provides utility functions including:

- Logging setup and configuration
- Processing statistics
"""

from glyphbridge.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
