"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

FALLBACK_FRAME_WIDTH: Final = 80
ERROR_MESSAGE_MAX_LENGTH: Final = 160

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 0.1
COMMAND_TIMEOUT_MIN: Final = 1

__all__ = [
    "COMMAND_TIMEOUT_MIN",
    "ERROR_MESSAGE_MAX_LENGTH",
    "FALLBACK_FRAME_WIDTH",
    "REFRESH_INTERVAL_MIN",
]
