"""Timeout constants for the TUI.

All timeout and interval values for API requests, async operations, and refresh cycles.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "10s"

# Process-level command timeout (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 15

# ============================================================================
# Async operation timeouts (float, in seconds)
# ============================================================================

# Budget for one target's full poll sequence. Each step gets what is left
# of it, so a step that runs out keeps the fields captured before it.
TARGET_POLL_TIMEOUT: Final = 30.0

# Time the aggregator allows past the poll budget, including any wait for
# the previous poll of the same target, before it abandons the poll.
POLL_DEADLINE_GRACE: Final = 5.0

# ============================================================================
# Refresh cycle
# ============================================================================

TICK_INTERVAL: Final = 1.0

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "POLL_DEADLINE_GRACE",
    "TARGET_POLL_TIMEOUT",
    "TICK_INTERVAL",
]
