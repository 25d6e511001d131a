"""Utility functions for corefont.

This module provides utility functions including:

- Logging setup and configuration
- Build progress and statistics tracking
"""

from corefont.utils.logging import (
    BuildLogger,
    BuildStats,
    configure_logging,
)

__all__ = [
    "BuildLogger",
    "BuildStats",
    "configure_logging",
]
