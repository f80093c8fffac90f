"""Utility functions for glyphlayout.

This module provides utility functions including:

- Logging setup and configuration
- Layout statistics tracking
"""

from glyphlayout.utils.logging import (
    LayoutLogger,
    LayoutStats,
    configure_logging,
    remove_logging_handlers,
)

__all__ = [
    "LayoutLogger",
    "LayoutStats",
    "configure_logging",
    "remove_logging_handlers",
]
