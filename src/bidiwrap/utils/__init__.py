"""Utility functions for bidiwrap.

This module provides:

- Logging setup and configuration
- Run statistics for the CLI
"""

from bidiwrap.utils.logging import (
    WrapLogger,
    WrapStats,
    configure_logging,
)

__all__ = [
    "WrapLogger",
    "WrapStats",
    "configure_logging",
]
