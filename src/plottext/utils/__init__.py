"""Utility functions for plottext.

This module provides utility functions including:

- Logging setup and configuration
- Compilation statistics tracking
"""

from plottext.utils.logging import (
    CompileLogger,
    CompileStats,
    configure_logging,
)

__all__ = [
    "CompileLogger",
    "CompileStats",
    "configure_logging",
]
