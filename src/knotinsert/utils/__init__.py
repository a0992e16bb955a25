"""Utility functions for knotinsert.

This module provides utility functions including:

- Logging setup and configuration
- Edit statistics tracking
"""

from knotinsert.utils.logging import (
    EditLogger,
    EditStats,
    configure_logging,
)

__all__ = [
    "EditLogger",
    "EditStats",
    "configure_logging",
]
