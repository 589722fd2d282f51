"""Utility functions for RamenWatch TUI."""

from ramenwatch.utils.logging_setup import PACKAGE_LOGGER, configure_logging

__all__ = [
    "PACKAGE_LOGGER",
    "configure_logging",
]
